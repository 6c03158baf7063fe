"""FastAPI application exposing tracer snapshots."""

from __future__ import annotations

from typing import Any, Dict, Iterable

from fastapi import FastAPI, HTTPException

from ..logging_utils import configure_logging
from ..metrics import summarize
from ..tracer import SimpleTracer


def create_app(tracers: Iterable[SimpleTracer] = ()) -> FastAPI:
    configure_logging()

    registry: Dict[str, SimpleTracer] = {}
    for tracer in tracers:
        if tracer.label in registry:
            raise ValueError(f"Duplicate tracer label: {tracer.label}")
        registry[tracer.label] = tracer

    app = FastAPI(title="Method Tracer", version="0.1.0")

    @app.get("/healthz", tags=["system"])
    def healthcheck() -> Dict[str, Any]:
        return {"status": "ok", "tracers": len(registry)}

    @app.get("/traces", tags=["traces"])
    def all_traces() -> Dict[str, Any]:
        return {"tracers": {label: tracer.fetch_results().as_dict() for label, tracer in registry.items()}}

    @app.get("/traces/{label}", tags=["traces"])
    def traces_for(label: str) -> Dict[str, Any]:
        tracer = registry.get(label)
        if tracer is None:
            raise HTTPException(status_code=404, detail=f"No tracer registered for {label}.")
        payload = tracer.fetch_results().as_dict()
        payload["methods"] = sorted(tracer.traced_methods)
        return payload

    @app.get("/metrics/methods", tags=["metrics"])
    def method_metrics() -> Dict[str, Any]:
        return {"methods": summarize(tracer.fetch_results() for tracer in registry.values())}

    return app
