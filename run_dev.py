# run_dev.py
"""
Local development launcher for FastAPI.
Equivalent to: `uvicorn llm_gateway.app:app --reload --host 0.0.0.0 --port 3000`
"""

import uvicorn

from llm_gateway.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "llm_gateway.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
    )
