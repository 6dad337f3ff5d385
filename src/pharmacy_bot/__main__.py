"""Run with: python -m pharmacy_bot"""

import uvicorn

from pharmacy_bot.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "pharmacy_bot.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )
