import os
import logging
from typing import Dict, Any, Optional
from slack_bolt.async_app import AsyncApp
from slack_bolt.adapter.fastapi.async_handler import AsyncSlackRequestHandler

from runtime.clock import SystemClock
from runtime.config import DaysConfig, load_config
from runtime.message_runner import AsyncioSleepDelay, DelayFunc

# Import modular Slack components
from .handlers.modal_handler import SlackModalHandler, MONTH_SELECTION_CALLBACK_ID
from .features.workflows.days_workflow import DaysWorkflow

logger = logging.getLogger(__name__)

DAYS_SHORTCUT_CALLBACK_ID = "days_shortcut"
DAYS_COMMAND = "/days"


class SlackInterface:
    """
    Slack app for the days workflow - shortcut or /days in, one message per date out
    """

    def __init__(self, config: Optional[DaysConfig] = None, app: Optional[AsyncApp] = None,
                 clock=None, delay: Optional[DelayFunc] = None):
        self.config = config or load_config()

        # Initialize Slack app
        self.app = app or AsyncApp(
            token=os.environ.get("SLACK_BOT_TOKEN"),
            signing_secret=os.environ.get("SLACK_SIGNING_SECRET")
        )

        # Initialize modular services
        self.clock = clock or SystemClock(self.config.timezone)
        self.modal_handler = SlackModalHandler(self.clock, self.config.option_count)
        self.workflow = DaysWorkflow(
            self.modal_handler,
            delay=delay or AsyncioSleepDelay(self.config.post_delay)
        )

        # Setup handlers
        self._setup_handlers()

        # Create FastAPI handler
        self.handler = AsyncSlackRequestHandler(self.app)

    def _setup_handlers(self):
        """Setup Slack trigger and form handlers"""

        @self.app.shortcut(DAYS_SHORTCUT_CALLBACK_ID)
        async def handle_days_shortcut(ack, body, client):
            # Ack first - trigger_id is only valid for 3 seconds
            await ack()
            await self.handle_days_shortcut(body, client)

        @self.app.command(DAYS_COMMAND)
        async def handle_days_command(ack, body, client):
            await ack()
            await self.handle_days_command(body, client)

        @self.app.view(MONTH_SELECTION_CALLBACK_ID)
        async def handle_month_selection(ack, body, client):
            # Close the modal right away; posting a month takes longer than the ack window
            await ack()
            await self.handle_month_selection(body, client)

    async def handle_days_shortcut(self, body: Dict[str, Any], client) -> None:
        """Message shortcut: open the form for the channel the shortcut was used in"""
        channel_id = body.get("channel", {}).get("id")
        user_id = body.get("user", {}).get("id")
        await self._start_workflow(client, body.get("trigger_id"), channel_id, user_id)

    async def handle_days_command(self, body: Dict[str, Any], client) -> None:
        """Slash command: open the form for the channel the command was typed in"""
        await self._start_workflow(client, body.get("trigger_id"), body.get("channel_id"), body.get("user_id"))

    async def _start_workflow(self, client, trigger_id: Optional[str], channel_id: Optional[str], user_id: Optional[str]) -> None:
        if not channel_id:
            logger.error(f"Days workflow triggered by {user_id} without a channel")
            return
        try:
            await self.workflow.start(client, trigger_id, channel_id, user_id)
        except Exception as e:
            # User already notified by the modal handler
            logger.error(f"Failed to start days workflow for user {user_id}: {e}")

    async def handle_month_selection(self, body: Dict[str, Any], client) -> None:
        """Form submitted: post the dates and the confirmation"""
        user_id = body.get("user", {}).get("id")
        try:
            outcome = await self.workflow.complete(client, body.get("view", {}))
            if outcome:
                logger.info(f"Days workflow for user {user_id} finished: ok={outcome.ok} posted={outcome.posted}")
        except Exception as e:
            logger.error(f"Error completing days workflow for user {user_id}: {e}", exc_info=True)

    def get_fastapi_handler(self):
        """Get FastAPI handler for webhook integration"""
        return self.handler


# For FastAPI integration
def create_slack_app():
    """Create days Slack interface for FastAPI"""
    slack_interface = SlackInterface()
    return slack_interface.get_fastapi_handler()
