"""
Localized caption language labels.

Turns YouTube's English track names such as "Japanese (auto-generated)" into
Japanese display labels such as "日本語（自動生成）".
"""

from __future__ import annotations

import re

AUTO_GENERATED_MARKER = "（自動生成）"

_AUTO_GENERATED_PATTERNS = [
    re.compile(r"\s*\(auto-generated\)", re.IGNORECASE),
    re.compile(r"\s*\(自動生成\)"),
]

# Checked in order; the first entry that matches wins
LANGUAGE_NAMES: list[tuple[str, str]] = [
    ("Japanese", "日本語"),
    ("English", "英語"),
    ("Chinese", "中国語"),
    ("Korean", "韓国語"),
    ("Spanish", "スペイン語"),
    ("French", "フランス語"),
    ("German", "ドイツ語"),
    ("Italian", "イタリア語"),
    ("Portuguese", "ポルトガル語"),
    ("Russian", "ロシア語"),
    ("Arabic", "アラビア語"),
    ("Hindi", "ヒンディー語"),
    ("Thai", "タイ語"),
    ("Vietnamese", "ベトナム語"),
    ("Indonesian", "インドネシア語"),
    ("Dutch", "オランダ語"),
    ("Polish", "ポーランド語"),
    ("Turkish", "トルコ語"),
    ("Swedish", "スウェーデン語"),
    ("Norwegian", "ノルウェー語"),
    ("Danish", "デンマーク語"),
    ("Finnish", "フィンランド語"),
    ("Greek", "ギリシャ語"),
    ("Hebrew", "ヘブライ語"),
    ("Czech", "チェコ語"),
    ("Romanian", "ルーマニア語"),
    ("Hungarian", "ハンガリー語"),
    ("Ukrainian", "ウクライナ語"),
    ("Malay", "マレー語"),
    ("Filipino", "フィリピン語"),
    ("Bengali", "ベンガル語"),
    ("Tamil", "タミル語"),
    ("Telugu", "テルグ語"),
    ("Marathi", "マラーティー語"),
    ("Gujarati", "グジャラート語"),
    ("Kannada", "カンナダ語"),
    ("Punjabi", "パンジャブ語"),
    ("Urdu", "ウルドゥー語"),
]


def normalize_auto_generated(label: str) -> str:
    """Replace any auto-generated marker with the localized one."""
    for pattern in _AUTO_GENERATED_PATTERNS:
        label = pattern.sub(AUTO_GENERATED_MARKER, label)
    return label


def translate_language_name(label: str) -> str:
    """
    Translate a caption track name into a Japanese display label.

    Args:
        label: Track name as reported by YouTube.

    Returns:
        Label with the language name localized and the auto-generated marker
        normalized. Unknown languages keep their original name.
    """
    translated = normalize_auto_generated(label)

    for english, localized in LANGUAGE_NAMES:
        if (
            translated == english
            or translated.startswith(english + " ")
            or english in translated
        ):
            return translated.replace(english, localized, 1)

    return translated
