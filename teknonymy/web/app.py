from fastapi import FastAPI, HTTPException
from typing import Any, Dict
import logging

from ..config import load_config
from ..models import Person
from ..resolver import TeknonymyService, build_teknonym

cfg = load_config()
logging.basicConfig(level=cfg.numeric_log_level())

app = FastAPI(title="teknonymy")

# raises on an unknown configured strategy
service = TeknonymyService(cfg.strategy)


@app.get("/")
def info():
    return {"service": "teknonymy", "strategy": service.strategy}


@app.post("/api/teknonym")
def api_teknonym(data: Dict[str, Any]):
    try:
        root = Person.from_dict(data)
    except ValueError as exc:
        logging.info("rejected tree: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))
    descendant, depth = service.find_descendant(root)
    return {
        "teknonym": build_teknonym(root, descendant, depth),
        "descendant": descendant.name if depth else None,
        "depth": depth,
    }
