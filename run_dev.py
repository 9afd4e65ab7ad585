# run_dev.py
"""Run the uigen API locally with auto-reload (uvicorn uigen.app:app --reload)."""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "uigen.app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
