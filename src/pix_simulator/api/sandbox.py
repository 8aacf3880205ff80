import structlog
from fastapi import FastAPI
from pydantic import BaseModel, Field


logger = structlog.get_logger()


class TransferPayload(BaseModel):
    amount_cents: int
    destination_key: str = Field(min_length=1)


class TransferReply(BaseModel):
    code: str


def create_sandbox_app(response_code: str = "SUCCESS") -> FastAPI:
    """Create a sandbox Pix server that answers every transfer with `response_code`."""
    app = FastAPI(
        title="Pix Sandbox Server",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.post("/pix/transfers")
    async def transfer(payload: TransferPayload) -> TransferReply:
        logger.info(
            "sandbox_transfer_received",
            amount_cents=payload.amount_cents,
            destination_key=payload.destination_key,
            response_code=response_code,
        )
        return TransferReply(code=response_code)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app
