import os
import json
import configparser

from mcheck.component import Component


class Config(Component):
    """
    설정 관리 컴포넌트 (JSON/INI)

    .json 파일은 JSON으로, .conf/.ini 파일은 INI로 읽어
    섹션 단위 dict로 보관하며, 타입 변환을 지원합니다.
    """
    _default_conf_file = 'mcheck.json'

    def __init__(self, config_file=None, parent=None, name='Config'):
        """
        Config 초기화

        Args:
            config_file: 설정 파일 경로 (None이면 mcheck.json)
            parent: 부모 컴포넌트
            name: 컴포넌트 이름
        """
        super().__init__(name, parent)
        self._config_file = str(config_file) if config_file is not None else Config._default_conf_file
        self._config = self._load_config()

    def _load_config(self) -> dict:
        """
        설정 파일 로드

        Returns:
            dict: 로드된 설정 딕셔너리 (파일이 없거나 깨졌으면 빈 dict)
        """
        self.l.info('설정 파일 로드: %s', self._config_file)
        if not os.path.exists(self._config_file):
            self.l.warning('설정 파일 없음, 빈 설정 사용: %s', self._config_file)
            return {}

        if self._config_file.endswith(('.conf', '.ini')):
            return self._load_ini()

        try:
            with open(self._config_file, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            self.l.error('JSON 설정 파일 로드 실패 (%s): %s', self._config_file, e)
            return {}

    def _load_ini(self) -> dict:
        """INI 파일을 dict로 변환"""
        parser = configparser.ConfigParser()
        parser.read(self._config_file, encoding='utf-8')

        config = {}
        for section in parser.sections():
            config[section] = dict(parser.items(section))
        return config

    def _parse_value(self, value, dtype=None):
        """
        값을 지정된 타입으로 파싱

        JSON 숫자 값(예: 17, 13.2)은 문자열로 바꾼 뒤 변환합니다.

        Args:
            value: 파싱할 값
            dtype: 목표 타입 (None, str, int 또는 Version 같은 callable)

        Returns:
            파싱된 값

        Raises:
            ValueError: 타입 변환 실패 시
        """
        if dtype is None:
            return value

        if isinstance(value, (dict, list)):
            raise ValueError(f'Cannot convert {type(value).__name__} to {dtype.__name__}')
        if not isinstance(value, str):
            value = str(value)
        return dtype(value)

    def sections(self, prefix: str = '') -> list:
        """
        섹션 이름 목록 반환

        Args:
            prefix: 섹션 이름 접두어 (빈 문자열이면 전체)

        Returns:
            list: 접두어로 시작하는 섹션 이름 목록
        """
        return [s for s in self._config if s.startswith(prefix)]

    def get_config(self, section: str, key: str = None, default=None, dtype=None):
        """
        설정 값을 반환합니다.

        Args:
            section: 섹션 이름 (또는 'section\\key' 형식)
            key: 키 이름 (None이면 섹션 전체 반환)
            default: 기본값
            dtype: 데이터 타입 (str, int 또는 Version 같은 callable)

        Returns:
            설정 값 (key가 None이면 섹션 dict)

        Raises:
            KeyError: 섹션 또는 키가 없고 default도 None인 경우
        """
        if key is None and '\\' in section:
            section, key = section.split('\\', 1)

        if section not in self._config:
            if default is not None and key is not None:
                return self._parse_value(default, dtype)
            raise KeyError(f'Section does not exist: {section}')

        if key is None:
            return self._config[section]

        if key not in self._config[section]:
            if default is not None:
                return self._parse_value(default, dtype)
            raise KeyError(f'Config does not exist: {section}\\{key}')

        return self._parse_value(self._config[section][key], dtype)
