from fastapi import FastAPI, Request
import logging

from interfaces.slack.core_slack_orchestration import SlackInterface
from runtime.config import load_config

config = load_config()

# Configure logging
logging.basicConfig(level=getattr(logging, config.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)

# Create a FastAPI instance
app = FastAPI(
    title="kozako - Slack Days Server",
    description="選択した月の日付を個別のメッセージとして表示するアプリ",
    version="1.0.0"
)

# Get the Slack handler
slack_interface = SlackInterface(config=config)
slack_handler = slack_interface.get_fastapi_handler()


@app.on_event("startup")
async def startup_event():
    logger.info(
        f"Days service started (post_delay={config.post_delay}s, "
        f"options={config.option_count}, timezone={slack_interface.clock.tz_name})"
    )


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Days service stopped")


# Slack webhook endpoints
@app.post("/slack/events")
async def slack_events_endpoint(request: Request):
    """Endpoint for Slack Events API and slash commands"""
    return await slack_handler.handle(request)


@app.post("/slack/interactive")
async def slack_interactive_endpoint(request: Request):
    """Endpoint for Slack Interactivity (shortcuts, modal submissions)"""
    return await slack_handler.handle(request)


@app.post("/slack/actions")
async def slack_actions_endpoint(request: Request):
    """An alternative common endpoint for Slack Interactivity."""
    return await slack_handler.handle(request)


@app.get("/health")
async def health_check():
    """Health check for the days service"""
    return {"status": "healthy", "services": ["slack"]}


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with service information"""
    return {
        "service": "kozako",
        "slack_endpoints": ["/slack/events", "/slack/interactive", "/slack/actions"],
        "health": "/health",
        "docs": "/docs"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
