"""
Slack Modal Handler

Manages the month selection form for the days workflow.
Handles modal creation, opening and reading back the submitted month.
"""

import json
import logging
from typing import Dict, Any, List, Optional, Tuple

from tools.calendar_days import DEFAULT_OPTION_COUNT, month_options

logger = logging.getLogger(__name__)

MONTH_SELECTION_CALLBACK_ID = "month_selection_modal"
SELECTED_MONTH_BLOCK_ID = "selected_month_block"
SELECTED_MONTH_ACTION_ID = "selected_month"


class SlackModalHandler:
    """Handles the month selection modal"""

    def __init__(self, clock, option_count: int = DEFAULT_OPTION_COUNT):
        self.clock = clock
        self.option_count = option_count

    def _build_options(self) -> List[Dict[str, Any]]:
        """Month options as Slack static_select option objects"""
        return [
            {
                "text": {"type": "plain_text", "text": option["title"]},
                "value": option["value"]
            }
            for option in month_options(self.clock.today(), self.option_count)
        ]

    def build_month_selection_view(self, channel_id: str) -> Dict[str, Any]:
        """Construct the month selection modal; the target channel rides in private_metadata"""
        options = self._build_options()

        modal = {
            "type": "modal",
            "callback_id": MONTH_SELECTION_CALLBACK_ID,
            "title": {"type": "plain_text", "text": "月を選択"},
            "submit": {"type": "plain_text", "text": "選択"},
            "close": {"type": "plain_text", "text": "キャンセル"},
            "blocks": [
                {
                    "type": "input",
                    "block_id": SELECTED_MONTH_BLOCK_ID,
                    "label": {"type": "plain_text", "text": "月を選択してください"},
                    "element": {
                        "type": "static_select",
                        "action_id": SELECTED_MONTH_ACTION_ID,
                        "placeholder": {"type": "plain_text", "text": "月"},
                        "options": options
                    }
                }
            ],
            "private_metadata": json.dumps({"channel_id": channel_id})
        }

        logger.info(f"Built month selection modal with {len(options)} options for channel {channel_id}")
        return modal

    async def open_month_selection_modal(self, client, trigger_id: str, channel_id: str, user_id: Optional[str] = None) -> None:
        """Open the month selection modal - must run inside the trigger_id window"""
        try:
            if not trigger_id:
                raise ValueError("Missing trigger_id")

            modal_view = self.build_month_selection_view(channel_id)
            response = await client.views_open(
                trigger_id=trigger_id,
                view=modal_view
            )

            if not response.get("ok", True):
                error_msg = response.get('error', 'unknown_error')
                raise Exception(f"Slack API error: {error_msg}")

            logger.info(f"Opened month selection modal for user {user_id} in channel {channel_id}")

        except Exception as e:
            logger.error(f"Error opening month selection modal: {e}", exc_info=True)

            if "trigger_id" in str(e).lower():
                user_message = "Request expired. Please run the shortcut again."
            else:
                user_message = "月の選択フォームを開けませんでした。もう一度お試しください。"

            try:
                if channel_id and user_id:
                    await client.chat_postEphemeral(
                        channel=channel_id,
                        user=user_id,
                        text=user_message
                    )
            except Exception as ephemeral_error:
                logger.warning(f"Failed to send ephemeral error message: {ephemeral_error}")

            raise

    @staticmethod
    def extract_submission(view: Dict[str, Any]) -> Tuple[Optional[str], Optional[str]]:
        """Read (selected_month, channel_id) back out of a submitted view"""
        try:
            meta = json.loads(view.get("private_metadata") or "{}")
        except (TypeError, ValueError):
            logger.warning("Month selection view has unreadable private_metadata")
            meta = {}
        channel_id = meta.get("channel_id")

        state_values = view.get("state", {}).get("values", {})
        selected = (
            state_values.get(SELECTED_MONTH_BLOCK_ID, {})
            .get(SELECTED_MONTH_ACTION_ID, {})
            .get("selected_option") or {}
        )
        return selected.get("value"), channel_id
