"""명령행 테스트"""

import pytest
from mcheck.manage import parse_args, main


class TestParseArgs:

    def test_compare(self):
        args = parse_args(['compare', '1.0', '1.1'])
        assert args.mode == 'compare'
        assert args.version_a == '1.0'
        assert args.version_b == '1.1'
        assert args.log_level == 'WARNING'

    def test_check(self):
        args = parse_args(['-l', 'DEBUG', 'check', '-c', 'x.json', 'gcc=12', 'java=17'])
        assert args.mode == 'check'
        assert args.config_file == 'x.json'
        assert args.installed == ['gcc=12', 'java=17']
        assert args.log_level == 'DEBUG'

    def test_mode_required(self):
        with pytest.raises(SystemExit):
            parse_args([])


class TestMain:

    @pytest.mark.parametrize('a, b, expected', [
        ('17', '17.0.0', '='),
        ('17.1-hello', '17.1', '<'),
        ('17.1.2.3', '17', '>'),
    ])
    def test_compare(self, capsys, a, b, expected):
        """비교 결과 출력"""
        assert main(['compare', a, b]) == 0
        assert capsys.readouterr().out.strip() == expected

    def test_check_pass(self, config_file, capsys):
        """모두 만족하면 종료 코드 0"""
        code = main(['check', '-c', str(config_file),
                     'gcc=12.3.0', 'cmake=3.28.1', 'java=17.0.9'])
        out = capsys.readouterr().out

        assert code == 0
        assert 'OK gcc 12.3.0' in out
        assert 'OK java 17.0.9' in out

    def test_check_fail(self, config_file, capsys):
        """하나라도 실패하면 종료 코드 1"""
        code = main(['check', '-c', str(config_file), 'gcc=14.1', 'java=17'])
        out = capsys.readouterr().out

        assert code == 1
        assert 'FAIL gcc 14.1 (14.1 > maximum 13.2)' in out
        assert 'FAIL cmake - (not installed)' in out
        assert 'OK java 17' in out

    def test_check_bad_pair(self, config_file):
        """TOOL=VERSION 형식이 아니면 종료 코드 2"""
        assert main(['check', '-c', str(config_file), 'gcc']) == 2

    def test_check_bad_section(self, temp_dir, capsys):
        """잘못된 'tool:' 섹션이면 종료 코드 2"""
        path = temp_dir / 'bad.json'
        path.write_text('{"tool:gcc": "11"}', encoding='utf-8')

        assert main(['check', '-c', str(path), 'gcc=12']) == 2
        assert capsys.readouterr().out == ''
