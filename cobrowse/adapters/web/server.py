"""FastAPI application factory and entry point."""

import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cobrowse.adapters.web.chat_routes import chat_router
from cobrowse.config import AppConfig, ConfigurationError, __version__
from cobrowse.domain.relay import ChatRelay


def create_app(relay: Optional[ChatRelay] = None, config: Optional[AppConfig] = None) -> FastAPI:
    """Build the app around an explicitly constructed relay.

    Without a relay, one is built from config with the Gemini adapter;
    a missing API key raises ConfigurationError here, before serving.
    """
    config = config or AppConfig.from_env()
    if relay is None:
        from cobrowse.adapters.llm.gemini_adapter import GeminiAdapter

        relay = ChatRelay(GeminiAdapter(config.require_api_key(), model=config.gemini_model))

    app = FastAPI(title="Cobrowse Relay", version=__version__)
    # No configured origins: reflect any origin
    origins = (
        {"allow_origins": config.cors_origins}
        if config.cors_origins
        else {"allow_origin_regex": ".*"}
    )
    app.add_middleware(
        CORSMiddleware,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        **origins,
    )
    app.state.relay = relay
    app.state.request_timeout = config.request_timeout_seconds
    app.include_router(chat_router)
    return app


def main():
    config = AppConfig.from_env()
    try:
        app = create_app(config=config)
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    print(f"Backend server running on port {config.port}")
    print(f"Health check: http://localhost:{config.port}/api/health")
    uvicorn.run(app, host=config.host, port=config.port, log_level="info")


if __name__ == "__main__":
    main()
