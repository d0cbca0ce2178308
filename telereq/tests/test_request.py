import json

import pytest
from pydantic import ValidationError
from telereq.markup import inline_keyboard_markup, InlineKeyboardButton
from telereq.request import Audio, AudioMessage, Message, ParseMode
from telereq.wire import dumps


def test_new_message_has_exactly_two_keys():
    assert Message.new(42, "hi").to_wire() == {"chat_id": 42, "text": "hi"}


def test_new_message_exact_bytes():
    assert dumps(Message.new(42, "hi")) == b'{"chat_id":42,"text":"hi"}'


def test_keyword_constructor_matches_new():
    assert Message(chat_id=42, text="hi") == Message.new(42, "hi")


def test_keyboard_remover_preset():
    assert Message.with_keyboard_remover(42, "bye").to_wire() == {
        "chat_id": 42,
        "text": "bye",
        "reply_markup": {"remove_keyboard": True},
    }


def test_default_parse_mode_kept_in_memory_but_not_on_wire():
    msg = Message.new(1, "x")
    assert msg.parse_mode is ParseMode.PLAIN
    assert "parse_mode" not in msg.to_wire()


@pytest.mark.parametrize(
    "mode,expected",
    [
        (ParseMode.MARKDOWN, "markdown"),
        (ParseMode.HTML, "html"),
        ("html", "html"),
    ],
)
def test_non_default_parse_mode_is_emitted(mode, expected):
    assert Message.new(1, "x").with_parse_mode(mode).to_wire()["parse_mode"] == expected


def test_switching_back_to_plain_drops_parse_mode():
    msg = Message.new(1, "x").with_parse_mode("markdown").with_parse_mode("plain")
    assert "parse_mode" not in msg.to_wire()


def test_unknown_parse_mode_is_rejected():
    with pytest.raises(ValueError):
        Message.new(1, "x").with_parse_mode("bbcode")


def test_mutators_return_new_values():
    base = Message.new(1, "x")
    changed = base.with_parse_mode(ParseMode.HTML).with_reply_to(7).silent()
    assert base.to_wire() == {"chat_id": 1, "text": "x"}
    assert changed.to_wire() == {
        "chat_id": 1,
        "text": "x",
        "parse_mode": "html",
        "disable_notification": True,
        "reply_to_message_id": 7,
    }


def test_optional_fields_set_are_present():
    msg = Message.new(1, "x").with_web_page_preview(False)
    assert msg.to_wire()["disable_web_page_preview"] is True


def test_message_with_inline_keyboard():
    markup = inline_keyboard_markup(
        [[InlineKeyboardButton.new("Open").with_url("https://example.org")]]
    )
    encoded = Message.new(1, "x").with_reply_markup(markup).to_wire()
    assert encoded["reply_markup"] == {
        "inline_keyboard": [[{"text": "Open", "url": "https://example.org"}]]
    }


def test_messages_are_frozen():
    msg = Message.new(1, "x")
    with pytest.raises(ValidationError):
        msg.text = "y"


def test_unknown_keyword_is_rejected():
    with pytest.raises(ValidationError):
        Message(chat_id=1, text="x", bogus=True)


def test_missing_mandatory_field_is_rejected():
    with pytest.raises(ValidationError):
        Message(chat_id=1)


def test_out_of_range_values_pass_through():
    msg = Message.new(-1001234567890, "").with_reply_to(-5)
    assert msg.to_wire() == {
        "chat_id": -1001234567890,
        "text": "",
        "reply_to_message_id": -5,
    }


def test_serialization_is_deterministic():
    msg = Message.with_keyboard_remover(42, "bye").with_parse_mode("markdown")
    assert dumps(msg) == dumps(msg)
    assert json.loads(dumps(msg)) == msg.to_wire()


def test_audio_optional_fields():
    assert Audio.new("file-1", 180).to_wire() == {"file_id": "file-1", "duration": 180}
    audio = Audio(
        file_id="file-1",
        duration=180,
        performer="Band",
        title="Song",
        mime_type="audio/mpeg",
        file_size=1024,
    )
    assert audio.to_wire() == {
        "file_id": "file-1",
        "duration": 180,
        "performer": "Band",
        "title": "Song",
        "mime_type": "audio/mpeg",
        "file_size": 1024,
    }


def test_audio_message():
    assert AudioMessage.new(5, "file-1").to_wire() == {"chat_id": 5, "audio": "file-1"}
    captioned = AudioMessage.new(5, "file-1").with_caption("<b>hi</b>", ParseMode.HTML)
    assert captioned.to_wire() == {
        "chat_id": 5,
        "audio": "file-1",
        "caption": "<b>hi</b>",
        "parse_mode": "html",
    }


def test_api_methods():
    assert Message.api_method == "sendMessage"
    assert AudioMessage.api_method == "sendAudio"
    assert Audio.api_method is None


def test_mutators_reject_wrongly_typed_values():
    msg = Message.new(1, "x")
    with pytest.raises(ValidationError):
        msg.with_reply_to("7")
    with pytest.raises(ValidationError):
        msg.with_reply_markup({"remove_keyboard": True})
    with pytest.raises(ValidationError):
        AudioMessage.new(5, "file-1").with_caption(42)


def test_mutated_numbers_stay_numbers():
    encoded = json.loads(dumps(Message.new(1, "x").with_reply_to(7)))
    assert encoded["reply_to_message_id"] == 7
    assert isinstance(encoded["reply_to_message_id"], int)


def test_reply_markup_dict_resolves_by_its_keys():
    msg = Message(chat_id=1, text="x", reply_markup={"force_reply": True})
    assert msg.to_wire()["reply_markup"] == {"force_reply": True}


def test_ambiguous_reply_markup_dict_is_rejected():
    with pytest.raises(ValidationError):
        Message(chat_id=1, text="x", reply_markup={"selective": True})
