"""
Keyboards and reply interfaces attachable to outgoing messages.

ReplyMarkup alternatives carry no discriminator on the wire: the service
tells them apart by their key sets (inline_keyboard, keyboard,
remove_keyboard, force_reply).
"""

from typing import Literal, Union

from .wire import WireModel


class InlineKeyboardButton(WireModel):
    # at most one action is expected to be set; the service rejects the rest
    text: str
    url: str | None = None
    callback_data: str | None = None
    switch_inline_query: str | None = None
    switch_inline_query_current_chat: str | None = None
    pay: bool | None = None

    @classmethod
    def new(cls, text: str) -> "InlineKeyboardButton":
        return cls(text=text)

    def with_url(self, url: str) -> "InlineKeyboardButton":
        return self._evolve(url=url)

    def with_callback_data(self, data: str) -> "InlineKeyboardButton":
        return self._evolve(callback_data=data)

    def with_switch_inline_query(
        self, query: str, current_chat: bool = False
    ) -> "InlineKeyboardButton":
        # an empty query is meaningful: it inserts only the bot's username
        if current_chat:
            return self._evolve(switch_inline_query_current_chat=query)
        return self._evolve(switch_inline_query=query)

    def with_pay(self) -> "InlineKeyboardButton":
        return self._evolve(pay=True)


class KeyboardButton(WireModel):
    text: str
    request_contact: bool | None = None
    request_location: bool | None = None

    @classmethod
    def new(cls, text: str) -> "KeyboardButton":
        return cls(text=text)

    def with_contact_request(self) -> "KeyboardButton":
        return self._evolve(request_contact=True)

    def with_location_request(self) -> "KeyboardButton":
        return self._evolve(request_location=True)


class InlineKeyboardMarkup(WireModel):
    inline_keyboard: list[list[InlineKeyboardButton]]


class ReplyKeyboardMarkup(WireModel):
    keyboard: list[list[KeyboardButton]]
    resize_keyboard: bool | None = None
    one_time_keyboard: bool | None = None
    selective: bool | None = None

    def with_one_time_keyboard(self, flag: bool = True) -> "ReplyKeyboardMarkup":
        return self._evolve(one_time_keyboard=flag)

    def with_selective(self, flag: bool = True) -> "ReplyKeyboardMarkup":
        return self._evolve(selective=flag)


class ReplyKeyboardRemove(WireModel):
    remove_keyboard: Literal[True]
    selective: bool | None = None

    def with_selective(self, flag: bool = True) -> "ReplyKeyboardRemove":
        return self._evolve(selective=flag)


class ForceReply(WireModel):
    force_reply: Literal[True]
    selective: bool | None = None

    def with_selective(self, flag: bool = True) -> "ForceReply":
        return self._evolve(selective=flag)


ReplyMarkup = Union[
    InlineKeyboardMarkup,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ForceReply,
]


def inline_keyboard_markup(
    rows: list[list[InlineKeyboardButton]],
) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(inline_keyboard=rows)


def reply_keyboard_markup(buttons: list[KeyboardButton]) -> ReplyKeyboardMarkup:
    """Single-row custom keyboard, resized to fit its buttons."""
    return ReplyKeyboardMarkup(keyboard=[buttons], resize_keyboard=True)


def reply_keyboard_remove() -> ReplyKeyboardRemove:
    return ReplyKeyboardRemove(remove_keyboard=True)


def force_reply() -> ForceReply:
    return ForceReply(force_reply=True)
