from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from pydantic import BaseModel, Field, ValidationError

from ...api import call_api, get_api_functions
from ...errors import AvailabilityCheckError, DataFetchError, SchedulingConflictError

logger = logging.getLogger(__name__)

app = FastAPI(title="Church Agenda API", version="0.3.0", default_response_class=ORJSONResponse)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ApiCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


@app.get("/api/functions")
async def list_api_functions() -> ORJSONResponse:
    functions = [func.describe() for func in get_api_functions()]
    return ORJSONResponse({"functions": functions})


@app.post("/api/functions/{function_name}")
def invoke_api_function(function_name: str, request: ApiCallRequest) -> ORJSONResponse:
    try:
        result = call_api(function_name, **request.arguments)
    except KeyError as exc:
        logger.warning("API function not found: %s", function_name)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except SchedulingConflictError as exc:
        return ORJSONResponse(
            status_code=409,
            content={"detail": str(exc), "diagnostic": exc.diagnostic.to_dict()},
        )
    except AvailabilityCheckError as exc:
        raise HTTPException(status_code=503, detail=AvailabilityCheckError.user_message) from exc
    except DataFetchError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except ValidationError as exc:
        raise HTTPException(
            status_code=400,
            detail=exc.errors(include_url=False, include_context=False, include_input=False),
        ) from exc
    except (TypeError, ValueError) as exc:
        logger.warning("API function %s rejected arguments: %s", function_name, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    logger.debug("API function %s executed successfully", function_name)
    return ORJSONResponse({"name": function_name, "result": result})


def run_local_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    import asyncio
    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("Serving Church Agenda API on %s:%s", host, port)
    asyncio.run(serve(app, config))
