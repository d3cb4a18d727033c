from swg.core.session import Severity
from swg.util import format_diff

LANGUAGES = ("en", "ja")
DEFAULT_LANGUAGE = "en"

# Headline per severity, per language. The error line is appended for everything except PERFECT.
_HEADLINES = {
    "en": {
        Severity.PERFECT: "🎯 Perfect!\nSpot on!!",
        Severity.GREAT: "✨ Excellent!",
        Severity.GOOD: "👍 Great!",
        Severity.CLOSE: "😊 So close!",
        Severity.MISS: "😅 Not even close!",
    },
    "ja": {
        Severity.PERFECT: "🎯 完璧！\nピッタリ！！",
        Severity.GREAT: "✨ 素晴らしい！",
        Severity.GOOD: "👍 すごい！",
        Severity.CLOSE: "😊 惜しい！",
        Severity.MISS: "😅 全然ダメ！",
    },
}
_ERROR_LINE = {
    "en": "Off by {diff} s",
    "ja": "誤差 {diff} 秒",
}

# Static UI strings, looked up by key.
UI_TEXT = {
    "en": {
        "title": "Body Clock Challenge",
        "target": "Target time",
        "seconds": "{value} s",
        "prompt": "Count in your head...",
        "start": "Start",
        "stop": "Stop",
        "again": "Play again",
        "settings": "Settings",
    },
    "ja": {
        "title": "体内時計チャレンジ",
        "target": "目標タイム",
        "seconds": "{value} 秒",
        "prompt": "心の中で数えよう...",
        "start": "スタート",
        "stop": "ストップ",
        "again": "もう一回",
        "settings": "設定",
    },
}

ICONS = {
    Severity.PERFECT: "♛",     # crown
    Severity.GREAT: "★",       # star
    Severity.GOOD: "\U0001F44D",    # thumbs up
    Severity.CLOSE: "♥",       # heart
    Severity.MISS: "↻",        # retry arrow
}

# Colour role per severity; themes resolve roles into actual colours.
COLOR_ROLES = {
    Severity.PERFECT: "favorable",
    Severity.GREAT: "favorable",
    Severity.GOOD: "neutral",
    Severity.CLOSE: "cautionary",
    Severity.MISS: "unfavorable",
}


def resolve_language(language):
    return language if language in LANGUAGES else DEFAULT_LANGUAGE


def result_message(severity, diff, language=DEFAULT_LANGUAGE):
    language = resolve_language(language)
    headline = _HEADLINES[language][severity]
    if severity is Severity.PERFECT:
        return headline
    return headline + "\n" + _ERROR_LINE[language].format(diff=format_diff(diff))


def ui_text(key, language=DEFAULT_LANGUAGE, **kwargs):
    text = UI_TEXT[resolve_language(language)][key]
    return text.format(**kwargs) if kwargs else text
