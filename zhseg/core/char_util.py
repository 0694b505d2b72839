"""
字符工具
- 字符类型识别（数字 / 英文字母 / 中文 / 其他 CJK / 无用字符）
- 字符规范化（全角转半角，大写转小写）
"""
from enum import IntEnum


class CharType(IntEnum):
    """字符类型"""
    USELESS = 0
    ARABIC = 0x01
    ENGLISH = 0x02
    CHINESE = 0x04
    OTHER_CJK = 0x08


# 需要额外折叠的全角/半角标点对
_PUNCT_PAIRS = {
    '【': '[',
    '】': ']',
}


def _is_chinese(code: int) -> bool:
    """判断是否是中文汉字"""
    return (
        0x4E00 <= code <= 0x9FFF or      # CJK Unified Ideographs
        0x3400 <= code <= 0x4DBF or      # CJK Unified Ideographs Extension A
        0xF900 <= code <= 0xFAFF or      # CJK Compatibility Ideographs
        0x20000 <= code <= 0x2FA1F or    # Extension B ~ Compatibility Supplement
        code == 0x3007                   # 〇
    )


def _is_other_cjk(code: int) -> bool:
    """判断是否是日文假名、韩文等其他 CJK 字符"""
    return (
        0x3040 <= code <= 0x309F or      # Hiragana
        0x30A0 <= code <= 0x30FF or      # Katakana
        0x31F0 <= code <= 0x31FF or      # Katakana Phonetic Extensions
        0xAC00 <= code <= 0xD7AF or      # Hangul Syllables
        0x1100 <= code <= 0x11FF or      # Hangul Jamo
        0x3130 <= code <= 0x318F or      # Hangul Compatibility Jamo
        0xFF65 <= code <= 0xFFDC         # Halfwidth Katakana / Hangul
    )


def char_type(char: str) -> CharType:
    """识别单个字符的类型，不认识的字符一律视为无用字符"""
    if '0' <= char <= '9':
        return CharType.ARABIC
    if 'a' <= char <= 'z' or 'A' <= char <= 'Z':
        return CharType.ENGLISH

    code = ord(char)
    if _is_chinese(code):
        return CharType.CHINESE
    if _is_other_cjk(code):
        return CharType.OTHER_CJK
    return CharType.USELESS


def normalize(char: str) -> str:
    """
    字符规范化

    全角空格转半角空格，全角 ASCII 转半角，大写字母转小写。
    先折叠全角再转小写，保证 normalize(normalize(c)) == normalize(c)
    """
    code = ord(char)
    if code == 0x3000:
        char = ' '
    elif 0xFF01 <= code <= 0xFF5E:
        char = chr(code - 0xFEE0)
    else:
        char = _PUNCT_PAIRS.get(char, char)

    if 'A' <= char <= 'Z':
        char = chr(ord(char) + 32)
    return char


def normalize_text(text: str) -> str:
    """逐字符规范化一个字符串（用于词典词条）"""
    return ''.join(normalize(c) for c in text)
