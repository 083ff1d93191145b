# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/3 10:17
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 机器人回复模板
"""

# 自动翻译 / translatezh 的回复模板
TRANSLATED_WITH_ORIGINAL_TEMPLATE = """Original: {original}

🔄 Translated ({direction}):
{translated}"""

# tc 的回复模板
BOT_TRANSLATION_TEMPLATE = """🤖 Bot ({direction}):

{translated}"""

TO_CHINESE_USAGE = """📝 Usage:
/tc [English text to translate to Chinese]
Or reply to an English message with /tc"""

TO_ENGLISH_USAGE = """📝 Usage:
/translatezh [Chinese text to translate to English]
Or reply to a Chinese message with /translatezh"""

SMART_TRANSLATION_USAGE = """📝 Usage:
/translate [Chinese or English text]
Or reply to a message with /translate
Chinese is translated to English, anything else to Chinese."""

TO_CHINESE_ERROR_TEXT = "❌ Error translating your message to Chinese. Please try again."

TO_ENGLISH_ERROR_TEXT = "❌ Error translating your message to English. Please try again."

SMART_TRANSLATION_ERROR_TEXT = "❌ Error translating your message. Please try again."

GENERIC_ERROR_TEXT = "❌ Something went wrong while handling your request. Please try again later."

HELP_TEXT = """
🤖 *TranslationBot Help*

This bot helps bridge language barriers by translating between Chinese and English.

*Automatic Translation (if enabled):*
Chinese messages posted in the group (or a topic) will be automatically translated to English and shown as a reply in the same location.

*Commands:*
`/tc [English text]` - Translates your English text to Chinese and posts it in the current location (group or topic). You can also reply to an English message with just `/tc`.
`/translatezh [Chinese text]` - Manually translates Chinese text to English and posts it in the current location. You can also reply to a Chinese message with just `/translatezh`.
`/translate [text]` - Detects the language and translates Chinese to English, or anything else to Chinese.
`/help` - Shows this help message.
`/start` - Shows a welcome message.

*Example Usage for Replying:*
You: `/tc This is a test message.`
Bot: `🤖 Bot (EN → ZH): 这是一个测试消息。`

*Note:* Ensure the bot has permissions to read and send messages in the group.
"""

WELCOME_TEXT = """
👋 Welcome to TranslationBot!

I'm here to help you communicate across language barriers, specifically between Chinese and English.

➡️ Type `/help` to see available commands and how I work.
➡️ If I'm in a group with topics, I'll try to reply within the correct topic.
➡️ If I'm in a group, I can automatically translate Chinese messages to English (if this feature is enabled by the admin).
"""
