import asyncio
import logging

import pydantic

from .config import get_settings
from .inline import AnswerInlineQuery, Article
from .request import Message, ParseMode
from .tgio import Output
from .wire import dumps

logger = logging.getLogger(__name__)

# for exposure with fire module
script_registry = []


def script(func):
    script_registry.append((func.__name__, func))
    return func


def _build_message(chat_id, text, parse_mode="plain", remove_keyboard=False):
    if remove_keyboard:
        msg = Message.with_keyboard_remover(chat_id, str(text))
    else:
        msg = Message.new(chat_id, str(text))
    return msg.with_parse_mode(ParseMode(parse_mode))


@script
def message(chat_id, text, parse_mode="plain", remove_keyboard=False):
    """Print the sendMessage body for a text message"""
    print(dumps(_build_message(chat_id, text, parse_mode, remove_keyboard)).decode())


@script
def keyboard_remover(chat_id, text):
    """Print a sendMessage body that also hides the reply keyboard"""
    print(dumps(Message.with_keyboard_remover(chat_id, str(text))).decode())


@script
def article(
    inline_query_id,
    id,
    title,
    message_text,
    description="",
    thumb_url="",
    thumb_height=0,
    thumb_width=0,
    next_offset="",
):
    """Print an answerInlineQuery body holding a single article"""
    result = Article.new(
        str(id),
        str(title),
        str(message_text),
        str(description),
        str(thumb_url),
        thumb_height,
        thumb_width,
    )
    answer = AnswerInlineQuery[Article].new(str(inline_query_id), [result], str(next_offset))
    print(dumps(answer).decode())


@script
def send(chat_id, text, parse_mode="plain", remove_keyboard=False):
    """Send a text message with the configured bot token and print the raw reply"""

    async def _send():
        output = Output.from_settings(get_settings())
        try:
            return await output.call(
                _build_message(chat_id, text, parse_mode, remove_keyboard)
            )
        finally:
            await output.aclose()

    response = asyncio.run(_send())
    logger.info(f"{response.method} answered with HTTP {response.status_code}")
    print(response.contents)


def main():
    import fire

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        fire.Fire(dict(script_registry))
        return 0
    except pydantic.ValidationError as e:
        logger.error(f"Pydantic Validation Error(s) encountered:\n{e}")
        raise


if __name__ == "__main__":
    main()
