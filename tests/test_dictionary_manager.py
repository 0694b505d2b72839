"""
词典管理器测试
"""
import threading

import pytest

from zhseg.config import Settings
from zhseg.services.dictionary_manager import DictionaryManager, load_word_list
from zhseg.services.tokenizer import TokenizerService


def write_dicts(path, main=("中华", "人民"), quantifier=("个",), stopword=("的",), **extra):
    (path / "main.dic").write_text("\n".join(main) + "\n", encoding="utf-8")
    (path / "quantifier.dic").write_text("\n".join(quantifier) + "\n", encoding="utf-8")
    (path / "stopword.dic").write_text("\n".join(stopword) + "\n", encoding="utf-8")
    for name, words in extra.items():
        (path / f"{name}.dic").write_text("\n".join(words) + "\n", encoding="utf-8")


class TestLoadWordList:
    """词表读取测试"""

    def test_strip_lower_skip_blank(self, tmp_path):
        """测试去空白、转小写、忽略空行"""
        file = tmp_path / "words.dic"
        file.write_text("  中华 \n\nIPhone\n   \n人民\n", encoding="utf-8")
        assert load_word_list(file) == ["中华", "iphone", "人民"]

    def test_utf8_bom(self, tmp_path):
        """测试带 BOM 的词表首个词条可以正常加载"""
        file = tmp_path / "words.dic"
        file.write_bytes("中华\n人民\n".encode("utf-8-sig"))
        assert load_word_list(file) == ["中华", "人民"]

    def test_missing_file(self, tmp_path):
        """测试文件不存在时报错"""
        with pytest.raises(FileNotFoundError):
            load_word_list(tmp_path / "missing.dic")


class TestDictionaryManager:
    """词典管理器测试"""

    def test_lazy_load(self, tmp_path):
        """测试首次获取时才加载"""
        write_dicts(tmp_path)
        manager = DictionaryManager(tmp_path)
        assert not manager.is_loaded()
        dictionary = manager.get_dictionary()
        assert manager.is_loaded()
        assert manager.get_dictionary() is dictionary

    def test_missing_dictionary(self, tmp_path):
        """测试缺少词典文件时报错，不会静默使用空词典"""
        manager = DictionaryManager(tmp_path)
        with pytest.raises(FileNotFoundError):
            manager.load_all()
        assert not manager.is_loaded()

    def test_main_dict_with_bom(self, tmp_path):
        """测试主词典带 BOM 时首个词条参与匹配"""
        write_dicts(tmp_path)
        (tmp_path / "main.dic").write_bytes("中华\n人民\n".encode("utf-8-sig"))
        manager = DictionaryManager(tmp_path)
        manager.load_all()
        assert manager.contains("中华")
        assert manager.contains("人民")

    def test_stats(self, tmp_path):
        """测试统计信息"""
        write_dicts(tmp_path, ext=["分词", "引擎"])
        manager = DictionaryManager(tmp_path, ext_dicts=["ext.dic"])
        manager.load_all()
        stats = manager.get_stats()
        assert stats["main.dic"] == 2
        assert stats["ext.dic"] == 2
        assert stats["quantifier.dic"] == 1
        assert stats["stopword.dic"] == 1
        assert stats["main_words"] == 4

    def test_ext_dict_merged(self, tmp_path):
        """测试扩展词典并入主词典"""
        write_dicts(tmp_path, ext=["分词"])
        manager = DictionaryManager(tmp_path, ext_dicts=["ext.dic"])
        assert manager.contains("分词")
        assert manager.contains("中华")
        assert not manager.contains("共和国")

    def test_add_and_remove(self, tmp_path):
        """测试运行时增删词条"""
        write_dicts(tmp_path)
        manager = DictionaryManager(tmp_path)
        assert manager.add_words(["共和国", "  ", "ＡＢＣ"]) == ["共和国", "abc"]
        assert manager.contains("共和国")
        assert manager.contains("ABC")
        assert manager.remove_words(["中华"]) == ["中华"]
        assert not manager.contains("中华")
        assert manager.get_stats()["main_words"] == 3

    def test_reload_discards_runtime_changes(self, tmp_path):
        """测试重新加载后恢复文件中的词条"""
        write_dicts(tmp_path)
        manager = DictionaryManager(tmp_path)
        manager.remove_words(["中华"])
        manager.add_words(["共和国"])
        manager.reload_all()
        assert manager.contains("中华")
        assert not manager.contains("共和国")

    def test_concurrent_first_load(self, tmp_path):
        """测试多线程同时获取词典时只构建一次"""
        write_dicts(tmp_path)
        manager = DictionaryManager(tmp_path)
        results = []

        def worker():
            results.append(manager.get_dictionary())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len({id(d) for d in results}) == 1

    def test_from_settings(self, tmp_path):
        """测试从配置创建"""
        write_dicts(tmp_path)
        settings = Settings(dictionary_path=tmp_path)
        manager = DictionaryManager.from_settings(settings)
        assert manager.contains("人民")


class TestTokenizerService:
    """分词服务测试"""

    def setup_method(self):
        self.manager = None

    def _service(self, tmp_path, **kwargs):
        write_dicts(tmp_path, main=("中华人民共和国", "中华", "人民", "共和国"))
        self.manager = DictionaryManager(tmp_path)
        return TokenizerService(self.manager, **kwargs)

    def test_default_mode(self, tmp_path):
        """测试使用默认模式"""
        service = self._service(tmp_path, use_smart=True)
        result = service.process("中华人民共和国")
        assert result["use_smart"] is True
        assert result["tokens"] == ["中华人民共和国"]
        assert result["lexemes"] == [
            {"text": "中华人民共和国", "start": 0, "stop": 7, "type": "CNWORD"}
        ]

    def test_override_mode(self, tmp_path):
        """测试单次请求覆盖默认模式"""
        service = self._service(tmp_path, use_smart=True)
        result = service.process("中华人民共和国", use_smart=False)
        assert result["tokens"] == ["中华人民共和国", "中华", "人民", "共和国"]

    def test_runtime_word_takes_effect(self, tmp_path):
        """测试运行时添加的词立即参与分词"""
        service = self._service(tmp_path, use_smart=True)
        assert [l.text for l in service.segment("分词")] == ["分", "词"]
        self.manager.add_words(["分词"])
        assert [l.text for l in service.segment("分词")] == ["分词"]
