import sys
import uuid
from pathlib import Path

# ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient
from usertodo.main import app

client = TestClient(app)
email = f"quick_{uuid.uuid4().hex[:8]}@example.com"
r = client.post("/users", json={"name": "Quick Test", "email": email})
print('status', r.status_code)
print('json:', r.json())
if r.status_code == 201:
    user_id = r.json()["data"]["id"]
    r = client.post("/todos", json={"user_id": user_id, "title": "smoke test"})
    print('status', r.status_code)
    print('json:', r.json())
    r = client.delete(f"/users/{user_id}")
    print('status', r.status_code)
