#!/usr/bin/env python3
"""Development server runner for Cosmogen."""

import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "cosmogen.server.main:app",
        host=os.environ.get("COSMOGEN_HOST", "0.0.0.0"),
        port=int(os.environ.get("COSMOGEN_PORT", "9000")),
        reload=True,  # Auto-reload on code changes
        log_level="info",
    )
