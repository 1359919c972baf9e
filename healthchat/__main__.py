"""
Entry point: `python -m healthchat` or the `healthchat` console script.
"""
import logging
import uvicorn

from healthchat.core import config

logger = logging.getLogger("healthchat")


def main() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )
    logger.info("server running at http://localhost:%d", config.PORT)
    logger.info("API key: %s", "present" if config.GOOGLE_GEMINI_API_KEY else "missing")
    logger.info("routes:\n  - GET  /api/test\n  - GET  /api/health\n  - POST /api/chat")
    uvicorn.run("healthchat.main:app", host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
