"""
测试公共夹具
"""
import pytest

from zhseg.core.dict_trie import Dictionary

MAIN_WORDS = [
    "中华人民共和国", "中华", "人民", "共和国",
    "研究", "研究生", "生命", "起源",
    "北京", "北京大学", "大学", "大学生", "学生", "生活",
    "全国人民代表大会常务委员会", "全国", "代表", "大会", "常务", "委员", "委员会",
]
QUANTIFIER_WORDS = ["个", "十", "只", "年", "条"]
STOPWORDS = ["的", "了", "a", "the", "and"]


@pytest.fixture
def dictionary() -> Dictionary:
    return Dictionary(MAIN_WORDS, QUANTIFIER_WORDS, STOPWORDS)
