from typing import ClassVar, Generic, TypeVar, Union

from .markup import InlineKeyboardMarkup
from .request import ParseMode
from .wire import WireModel, omit_when


@omit_when(ParseMode.is_plain, "parse_mode")
class InputMessageContent(WireModel):
    """Text message sent on behalf of the user when an inline result is picked."""

    message_text: str
    parse_mode: ParseMode = ParseMode.PLAIN
    disable_web_page_preview: bool | None = None

    @classmethod
    def new(cls, message_text: str) -> "InputMessageContent":
        return cls(message_text=message_text)

    def with_parse_mode(self, mode: ParseMode | str) -> "InputMessageContent":
        return self._evolve(parse_mode=ParseMode(mode))


class Article(WireModel):
    """
    Link to an article or web page, tagged "article" on the wire.

    Attributes:
        id: Unique identifier of the result, 1-64 bytes.
        title: Title of the result.
        input_message_content: Content sent when the result is chosen.
        reply_markup: Inline keyboard attached to the sent message.
        url: URL of the result.
        hide_url: Don't show the URL in the message.
        description: Short description of the result.
        thumb_url: Thumbnail URL.
        thumb_width: Thumbnail width.
        thumb_height: Thumbnail height.
    """

    wire_tag: ClassVar[str] = "type"

    id: str
    title: str
    input_message_content: InputMessageContent
    reply_markup: InlineKeyboardMarkup | None = None
    url: str | None = None
    hide_url: bool | None = None
    description: str | None = None
    thumb_url: str | None = None
    thumb_width: int | None = None
    thumb_height: int | None = None

    @classmethod
    def new(
        cls,
        id: str,
        title: str,
        message_text: str,
        description: str,
        thumb_url: str,
        thumb_height: int,
        thumb_width: int,
    ) -> "Article":
        return cls(
            id=id,
            title=title,
            input_message_content=InputMessageContent.new(message_text),
            description=description,
            thumb_url=thumb_url,
            thumb_height=thumb_height,
            thumb_width=thumb_width,
        )

    def with_url(self, url: str, hide_url: bool | None = None) -> "Article":
        return self._evolve(url=url, hide_url=hide_url)

    def with_reply_markup(self, markup: InlineKeyboardMarkup) -> "Article":
        return self._evolve(reply_markup=markup)


@omit_when(ParseMode.is_plain, "parse_mode")
class Photo(WireModel):
    """Link to a JPEG photo, tagged "photo" on the wire."""

    wire_tag: ClassVar[str] = "type"

    id: str
    photo_url: str
    thumb_url: str
    photo_width: int | None = None
    photo_height: int | None = None
    title: str | None = None
    description: str | None = None
    caption: str | None = None
    parse_mode: ParseMode = ParseMode.PLAIN
    reply_markup: InlineKeyboardMarkup | None = None
    input_message_content: InputMessageContent | None = None

    @classmethod
    def new(cls, id: str, photo_url: str, thumb_url: str) -> "Photo":
        return cls(id=id, photo_url=photo_url, thumb_url=thumb_url)

    def with_caption(
        self, caption: str, mode: ParseMode | str = ParseMode.PLAIN
    ) -> "Photo":
        return self._evolve(caption=caption, parse_mode=ParseMode(mode))

    def with_size(self, width: int, height: int) -> "Photo":
        return self._evolve(photo_width=width, photo_height=height)


InlineQueryResult = Union[Article, Photo]

R = TypeVar("R", bound=WireModel)


class AnswerInlineQuery(WireModel, Generic[R]):
    """
    Body of an answerInlineQuery call.

    Results are encoded one by one in the order given; the service shows
    them in that order.

    Attributes:
        inline_query_id: Identifier of the answered query.
        results: Results for the query.
        cache_time: Seconds the result may be cached on the server.
        is_personal: Cache results only for the user that sent the query.
        next_offset: Offset the client sends to fetch more results.
        switch_pm_text: Label of a button switching to the private chat.
        switch_pm_parameter: /start parameter sent with that switch.
    """

    api_method: ClassVar[str] = "answerInlineQuery"

    inline_query_id: str
    results: list[R]
    cache_time: int | None = None
    is_personal: bool | None = None
    next_offset: str | None = None
    switch_pm_text: str | None = None
    switch_pm_parameter: str | None = None

    @classmethod
    def new(
        cls, inline_query_id: str, results: list[R], next_offset: str
    ) -> "AnswerInlineQuery[R]":
        return cls(
            inline_query_id=inline_query_id,
            results=results,
            next_offset=next_offset,
        )

    def with_cache_time(self, seconds: int) -> "AnswerInlineQuery[R]":
        return self._evolve(cache_time=seconds)

    def with_personal(self, flag: bool = True) -> "AnswerInlineQuery[R]":
        return self._evolve(is_personal=flag)

    def with_switch_pm(self, text: str, parameter: str) -> "AnswerInlineQuery[R]":
        return self._evolve(switch_pm_text=text, switch_pm_parameter=parameter)
