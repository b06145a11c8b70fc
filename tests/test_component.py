"""Component 로깅 테스트"""

import logging
import pytest
from mcheck.component import Component


class TestComponent:

    def test_name_and_repr(self):
        """계층형 이름과 표현"""
        root = Component('root')
        child = Component('child', parent=root)

        assert child.name == 'root-child'
        assert child.l.name == 'root-child'
        assert repr(root) == '<Component:root>'
        assert repr(child) == '<Component:root>/<Component:child>'

    def test_make_logger(self, temp_dir):
        """로그 레벨과 파일 핸들러 설정"""
        log_file = temp_dir / 'mcheck.log'
        root = Component('logtest')
        root.make_logger('debug', log_file=str(log_file))

        assert root.l.level == logging.DEBUG
        assert len(root.handlers) == 2

        child = Component('child', parent=root)
        assert child.l.level == logging.DEBUG
        assert child.l.handlers == root.handlers

        child.l.info('hello %s', 'world')
        for handler in root.handlers:
            handler.flush()
        text = log_file.read_text(encoding='utf-8')
        assert 'logtest-child [INFO] hello world' in text

        for handler in root.handlers:
            handler.close()

    def test_make_logger_twice(self):
        """같은 이름으로 다시 만들어도 핸들러가 중복되지 않음"""
        Component('dup').make_logger('INFO')
        again = Component('dup')
        again.make_logger('WARNING')

        assert len(again.l.handlers) == 1
        assert again.l.level == logging.WARNING

    def test_make_logger_closes_old_handlers(self, temp_dir):
        """같은 이름으로 다시 설정하면 이전 파일 핸들러를 닫음"""
        first = Component('reuse')
        first.make_logger('INFO', log_file=str(temp_dir / 'first.log'))
        old_file_handler = first.handlers[1]
        assert old_file_handler.stream is not None

        again = Component('reuse')
        again.make_logger('INFO')

        assert old_file_handler.stream is None
        assert old_file_handler not in again.l.handlers

    def test_unknown_level(self):
        with pytest.raises(ValueError, match='Unknown log level'):
            Component('bad').make_logger('LOUD')
