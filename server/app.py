import os
import secrets
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, File, HTTPException, UploadFile
from fastapi.security import HTTPBasic, HTTPBasicCredentials

# Make local package importable
import sys
BASE_DIR = Path(__file__).resolve().parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from imgclassify.core.config import NEGATIVE_LABEL
from imgclassify.core.scanner import is_image

app = FastAPI(title="Stand-in image classifier")
security = HTTPBasic(auto_error=False)

def _check_auth(credentials: Optional[HTTPBasicCredentials] = Depends(security)):
    user = os.getenv("STUB_USER")
    passwd = os.getenv("STUB_PASSWD")
    if not (user and passwd):
        return
    ok = (credentials is not None
          and secrets.compare_digest(credentials.username, user)
          and secrets.compare_digest(credentials.password, passwd))
    if not ok:
        raise HTTPException(status_code=401, detail="Unauthorized", headers={"WWW-Authenticate": "Basic"})

def label_for(filename: str) -> str:
    # cat_01.jpg -> cat ; neg*.png -> negative
    stem = Path(filename).stem.lower()
    if stem.startswith("neg"):
        return NEGATIVE_LABEL
    return stem.split("_")[0].split("-")[0] or "unknown"

@app.get("/health")
def health():
    return {"ok": True}

@app.post("/classify", dependencies=[Depends(_check_auth)])
async def classify(file: UploadFile = File(...)):
    name = file.filename or ""
    content = await file.read()
    if not is_image(name) or not content:
        return {"result": "fail", "error": f"not an image: {name}"}
    # Deterministic pseudo-confidence so repeated runs are comparable
    confidence = round(0.5 + (len(content) % 50) / 100.0, 2)
    return {"result": "ok", "classified": {label_for(name): confidence}}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=os.getenv("STUB_HOST", "127.0.0.1"), port=int(os.getenv("STUB_PORT", "8000")))
