"""
Days Workflow

月の日付表示: the user picks a month and every date of that month is posted
to the channel as its own "YYYY年MM月DD日(曜日W)" message. Weekdays are the
Japanese labels 日月火水木金土 and W is the week of the month.

Steps:
1. Open the month selection form
2. Post the dates (DaysFunction)
3. Send the DaysFunction result to the channel as a confirmation
"""

import logging
from typing import Dict, Any, Optional

from interfaces.slack.handlers.modal_handler import SlackModalHandler
from runtime.message_runner import DelayFunc
from .days_function import DaysFunction, DaysFunctionResult, invalid_month_message

logger = logging.getLogger(__name__)

CALLBACK_ID = "days_workflow"


class DaysWorkflow:
    """Runs the form -> post dates -> confirmation steps"""

    def __init__(self, modal_handler: SlackModalHandler, delay: Optional[DelayFunc] = None):
        self.modal_handler = modal_handler
        self.delay = delay

    async def start(self, client, trigger_id: str, channel_id: str, user_id: Optional[str] = None) -> None:
        """Step 1: open the month selection form"""
        logger.info(f"{CALLBACK_ID}: opening form for user {user_id} in channel {channel_id}")
        await self.modal_handler.open_month_selection_modal(client, trigger_id, channel_id, user_id)

    async def complete(self, client, view: Dict[str, Any]) -> Optional[DaysFunctionResult]:
        """Steps 2 and 3, run after the form is submitted"""
        selected_month, channel_id = self.modal_handler.extract_submission(view)
        if not channel_id:
            logger.error(f"{CALLBACK_ID}: submission has no channel, nothing to post to")
            return None

        if selected_month is None:
            outcome = DaysFunctionResult(result=invalid_month_message(""), ok=False)
        else:
            outcome = await DaysFunction(client, delay=self.delay).run(selected_month, channel_id)

        await self.send_confirmation(client, channel_id, outcome.result)
        return outcome

    async def send_confirmation(self, client, channel_id: str, message: str) -> None:
        """Step 3: post the result message"""
        try:
            await client.chat_postMessage(channel=channel_id, text=message)
            logger.info(f"{CALLBACK_ID}: confirmation sent to {channel_id}: {message}")
        except Exception as e:
            logger.error(f"{CALLBACK_ID}: failed to send confirmation to {channel_id}: {e}", exc_info=True)
