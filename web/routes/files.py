from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool

from web.deps import get_transfer_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/put-{target}")
async def put_file(target: str, request: Request) -> str:
    payload = await request.body()
    logger.info("POST /put-%s (%d byte name payload)", target, len(payload))
    service = get_transfer_service(request)
    result = await run_in_threadpool(service.put, target, payload)
    return result.message


@router.get("/get-{target}/{name:path}")
async def get_file(target: str, name: str, request: Request) -> str:
    logger.info("GET /get-%s/%s", target, name)
    service = get_transfer_service(request)
    stored = await run_in_threadpool(service.get, target, name)
    return stored.content
