"""
字符工具测试
"""
from zhseg.core.char_util import CharType, char_type, normalize, normalize_text


class TestCharType:
    """字符类型识别测试"""

    def test_arabic(self):
        """测试阿拉伯数字"""
        assert char_type("0") == CharType.ARABIC
        assert char_type("9") == CharType.ARABIC

    def test_english(self):
        """测试英文字母"""
        assert char_type("a") == CharType.ENGLISH
        assert char_type("Z") == CharType.ENGLISH

    def test_chinese(self):
        """测试中文汉字"""
        assert char_type("中") == CharType.CHINESE
        assert char_type("〇") == CharType.CHINESE
        assert char_type("㐀") == CharType.CHINESE

    def test_other_cjk(self):
        """测试日文假名、韩文"""
        assert char_type("ア") == CharType.OTHER_CJK
        assert char_type("あ") == CharType.OTHER_CJK
        assert char_type("한") == CharType.OTHER_CJK

    def test_useless(self):
        """测试标点、空白等无用字符"""
        for char in " ,.!@#，。\n":
            assert char_type(char) == CharType.USELESS


class TestNormalize:
    """字符规范化测试"""

    def test_fullwidth_to_halfwidth(self):
        """测试全角转半角"""
        assert normalize("１") == "1"
        assert normalize("！") == "!"
        assert normalize("　") == " "

    def test_uppercase_to_lowercase(self):
        """测试大写转小写，包括全角大写字母"""
        assert normalize("A") == "a"
        assert normalize("Ｈ") == "h"

    def test_bracket_pairs(self):
        """测试【】折叠为 []"""
        assert normalize("【") == "["
        assert normalize("】") == "]"

    def test_chinese_unchanged(self):
        """测试中文不变"""
        assert normalize("华") == "华"

    def test_idempotent(self):
        """测试规范化幂等"""
        for char in "Ａａ１!　中ア【Z":
            once = normalize(char)
            assert normalize(once) == once

    def test_normalize_text(self):
        """测试字符串规范化"""
        assert normalize_text("Ｈｅｌｌｏ　Ｗｏｒｌｄ") == "hello world"
