"""
Month Selection Modal Tests
"""

import json

import pytest

from interfaces.slack.handlers.modal_handler import (
    MONTH_SELECTION_CALLBACK_ID,
    SELECTED_MONTH_ACTION_ID,
    SELECTED_MONTH_BLOCK_ID,
    SlackModalHandler,
)

CHANNEL_ID = "C1234567890"


def test_modal_structure(fixed_clock):
    view = SlackModalHandler(fixed_clock).build_month_selection_view(CHANNEL_ID)

    assert view["type"] == "modal"
    assert view["callback_id"] == MONTH_SELECTION_CALLBACK_ID
    assert view["title"]["text"] == "月を選択"
    assert view["submit"]["text"] == "選択"
    assert json.loads(view["private_metadata"]) == {"channel_id": CHANNEL_ID}

    block = view["blocks"][0]
    assert block["type"] == "input"
    assert block["block_id"] == SELECTED_MONTH_BLOCK_ID
    assert block["label"]["text"] == "月を選択してください"
    assert block["element"]["action_id"] == SELECTED_MONTH_ACTION_ID


def test_modal_offers_fourteen_months_from_clock(fixed_clock):
    view = SlackModalHandler(fixed_clock).build_month_selection_view(CHANNEL_ID)
    options = view["blocks"][0]["element"]["options"]

    values = [option["value"] for option in options]
    assert len(values) == 14
    assert values[0] == "2025年05月"
    assert values[-1] == "2026年06月"
    assert all(option["text"]["text"] == option["value"] for option in options)


def test_option_count_is_configurable(fixed_clock):
    view = SlackModalHandler(fixed_clock, option_count=6).build_month_selection_view(CHANNEL_ID)
    assert len(view["blocks"][0]["element"]["options"]) == 6


def test_extract_submission():
    view = {
        "private_metadata": json.dumps({"channel_id": CHANNEL_ID}),
        "state": {"values": {SELECTED_MONTH_BLOCK_ID: {
            SELECTED_MONTH_ACTION_ID: {"selected_option": {"value": "2025年07月"}}
        }}}
    }
    assert SlackModalHandler.extract_submission(view) == ("2025年07月", CHANNEL_ID)


def test_extract_submission_with_missing_fields():
    assert SlackModalHandler.extract_submission({}) == (None, None)
    assert SlackModalHandler.extract_submission({"private_metadata": "not json"}) == (None, None)


@pytest.mark.asyncio
async def test_open_modal_calls_views_open(mock_client, fixed_clock):
    handler = SlackModalHandler(fixed_clock)

    await handler.open_month_selection_modal(mock_client, "trigger.123", CHANNEL_ID, "U123")

    mock_client.views_open.assert_awaited_once()
    assert mock_client.views_open.call_args.kwargs["trigger_id"] == "trigger.123"
    mock_client.chat_postEphemeral.assert_not_called()


@pytest.mark.asyncio
async def test_open_modal_failure_notifies_user_and_raises(mock_client, fixed_clock):
    mock_client.views_open.return_value = {"ok": False, "error": "expired_trigger_id"}
    handler = SlackModalHandler(fixed_clock)

    with pytest.raises(Exception, match="expired_trigger_id"):
        await handler.open_month_selection_modal(mock_client, "trigger.123", CHANNEL_ID, "U123")

    mock_client.chat_postEphemeral.assert_awaited_once()
    assert mock_client.chat_postEphemeral.call_args.kwargs["user"] == "U123"


@pytest.mark.asyncio
async def test_open_modal_without_trigger_id(mock_client, fixed_clock):
    handler = SlackModalHandler(fixed_clock)

    with pytest.raises(ValueError):
        await handler.open_month_selection_modal(mock_client, "", CHANNEL_ID, "U123")

    mock_client.views_open.assert_not_called()
