from enum import StrEnum
from typing import ClassVar

from .markup import ReplyMarkup, reply_keyboard_remove
from .wire import WireModel, omit_when


class ParseMode(StrEnum):
    """How the service interprets message text. PLAIN is the service default."""

    PLAIN = "plain"
    MARKDOWN = "markdown"
    HTML = "html"

    @staticmethod
    def is_plain(mode: "ParseMode") -> bool:
        return mode == ParseMode.PLAIN


@omit_when(ParseMode.is_plain, "parse_mode")
class Message(WireModel):
    """
    Body of a sendMessage call.

    Attributes:
        chat_id: Target chat identifier.
        text: Message text.
        parse_mode: Text markup; left off the wire while PLAIN.
        disable_web_page_preview: Suppress link previews.
        disable_notification: Deliver silently.
        reply_to_message_id: Message to reply to.
        reply_markup: Keyboard or reply interface attached to the message.
    """

    api_method: ClassVar[str] = "sendMessage"

    chat_id: int
    text: str
    parse_mode: ParseMode = ParseMode.PLAIN
    disable_web_page_preview: bool | None = None
    disable_notification: bool | None = None
    reply_to_message_id: int | None = None
    reply_markup: ReplyMarkup | None = None

    @classmethod
    def new(cls, chat_id: int, text: str) -> "Message":
        return cls(chat_id=chat_id, text=text)

    @classmethod
    def with_keyboard_remover(cls, chat_id: int, text: str) -> "Message":
        """Message that also hides the custom reply keyboard."""
        return cls(chat_id=chat_id, text=text, reply_markup=reply_keyboard_remove())

    def with_parse_mode(self, mode: ParseMode | str) -> "Message":
        return self._evolve(parse_mode=ParseMode(mode))

    def with_reply_markup(self, markup: ReplyMarkup) -> "Message":
        return self._evolve(reply_markup=markup)

    def with_reply_to(self, message_id: int) -> "Message":
        return self._evolve(reply_to_message_id=message_id)

    def with_web_page_preview(self, enabled: bool = True) -> "Message":
        return self._evolve(disable_web_page_preview=not enabled)

    def silent(self) -> "Message":
        return self._evolve(disable_notification=True)


class Audio(WireModel):
    file_id: str
    duration: int
    performer: str | None = None
    title: str | None = None
    mime_type: str | None = None
    file_size: int | None = None

    @classmethod
    def new(cls, file_id: str, duration: int) -> "Audio":
        return cls(file_id=file_id, duration=duration)


@omit_when(ParseMode.is_plain, "parse_mode")
class AudioMessage(WireModel):
    """Body of a sendAudio call; `audio` is a file_id or an HTTP URL."""

    api_method: ClassVar[str] = "sendAudio"

    chat_id: int
    audio: str
    caption: str | None = None
    parse_mode: ParseMode = ParseMode.PLAIN
    reply_markup: ReplyMarkup | None = None

    @classmethod
    def new(cls, chat_id: int, audio: str) -> "AudioMessage":
        return cls(chat_id=chat_id, audio=audio)

    def with_caption(
        self, caption: str, mode: ParseMode | str = ParseMode.PLAIN
    ) -> "AudioMessage":
        return self._evolve(caption=caption, parse_mode=ParseMode(mode))

    def with_reply_markup(self, markup: ReplyMarkup) -> "AudioMessage":
        return self._evolve(reply_markup=markup)
