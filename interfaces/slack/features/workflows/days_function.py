"""
Days Function

Workflow step that posts every date of the selected month as its own message.

Inputs:  selected_month ("YYYY年MM月"), channel_id
Outputs: result (human-readable summary)

Every failure path ends in a result string; nothing is raised to the caller.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from runtime.message_runner import (
    DelayFunc, DeliveryFailure, OrderedMessageRunner, OutboundMessage
)
from tools.calendar_days import InvalidMonthFormat, generate, parse_month_selector

logger = logging.getLogger(__name__)

CALLBACK_ID = "days_function"


class SlackPostError(Exception):
    """Slack Web API answered a post with ok: false"""
    pass


@dataclass
class DaysFunctionResult:
    result: str
    ok: bool
    posted: int = 0

    def to_outputs(self) -> Dict[str, Any]:
        return {"result": self.result}


def invalid_month_message(selected_month: str) -> str:
    return f"無効な月の形式です: {selected_month}"


def success_message(selected_month: str, total_days: int) -> str:
    return f"{selected_month}の{total_days}日分の日付を正常に投稿しました"


def delivery_error_message(detail: str) -> str:
    return f"日付の投稿中にエラーが発生しました: {detail}"


class DaysFunction:
    """Posts one message per day of the selected month, in calendar order"""

    def __init__(self, client, delay: Optional[DelayFunc] = None):
        self.client = client
        self.delay = delay

    async def _post(self, message: OutboundMessage) -> None:
        response = await self.client.chat_postMessage(
            channel=message.channel,
            text=message.text
        )
        if response is not None and not response.get("ok", True):
            raise SlackPostError(response.get("error", "unknown_error"))

    async def run(self, selected_month: str, channel_id: str) -> DaysFunctionResult:
        parsed = parse_month_selector(selected_month)
        if isinstance(parsed, InvalidMonthFormat):
            logger.warning(f"Rejected month selection {selected_month!r}: {parsed.reason}")
            return DaysFunctionResult(result=invalid_month_message(selected_month), ok=False)

        try:
            lines = generate(parsed.year, parsed.month)
            runner = OrderedMessageRunner(self._post, delay=self.delay)

            logger.info(f"{CALLBACK_ID}: posting {len(lines)} dates for {selected_month} to {channel_id}")
            posted = await runner.run([OutboundMessage(channel=channel_id, text=line) for line in lines])

            return DaysFunctionResult(
                result=success_message(selected_month, len(lines)),
                ok=True,
                posted=posted
            )
        except DeliveryFailure as e:
            logger.error(f"Posting dates for {selected_month} aborted after {e.sent} messages: {e.cause}")
            return DaysFunctionResult(result=delivery_error_message(str(e.cause)), ok=False, posted=e.sent)
        except Exception as e:
            logger.error(f"Unexpected error posting dates for {selected_month}: {e}", exc_info=True)
            return DaysFunctionResult(result=delivery_error_message(str(e)), ok=False)
