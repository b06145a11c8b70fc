"""
도구 버전 요구 사항 모듈

설치된 도구 버전이 최소/최대 버전 조건을 만족하는지 확인합니다.
"""

from dataclasses import dataclass
from typing import Optional, Union

from mcheck.component import Component
from mcheck.config import Config
from mcheck.version import Version


@dataclass(frozen=True)
class CheckResult:
    """요구 사항 확인 결과"""
    name: str
    installed: Optional[Version]
    ok: bool
    reason: str = ''


class Requirement:
    """
    도구 하나의 버전 요구 사항

    최소 버전은 일반 비교(>=)로, 최대 버전은 최대 버전이 가진
    구성 요소 개수까지만 비교합니다. 최대 버전 "17.5"는
    17.5.999를 허용하고 17.6은 거부합니다.
    """

    def __init__(self, name: str, minimum: Union[Version, str, None] = None,
                 maximum: Union[Version, str, None] = None):
        self.name = name
        self.minimum = Version._coerce(minimum) if minimum is not None else None
        self.maximum = Version._coerce(maximum) if maximum is not None else None

    def check(self, installed: Union[Version, str]) -> CheckResult:
        """
        설치된 버전 확인

        Args:
            installed: 설치된 버전

        Returns:
            CheckResult: 확인 결과 (ok가 False이면 reason에 사유)
        """
        installed = Version._coerce(installed)
        if self.minimum is not None and not installed.greater_or_equal_to(self.minimum):
            return CheckResult(self.name, installed, False,
                               f'{installed} < minimum {self.minimum}')
        if self.maximum is not None and \
                not self.maximum.greater_or_equal_to_ignoring_less_significant_numbers(installed):
            return CheckResult(self.name, installed, False,
                               f'{installed} > maximum {self.maximum}')
        return CheckResult(self.name, installed, True)

    def __repr__(self):
        return '<Requirement %s min=%s max=%s>' % (self.name, self.minimum, self.maximum)


class Checker(Component):
    """
    설정 파일 기반 요구 사항 검사 컴포넌트

    설정의 'tool:<이름>' 섹션마다 min/max 키로 Requirement를 만듭니다.

    예시 (mcheck.json):
        {"tool:gcc": {"min": "11", "max": "13.2"}}
    """
    _section_prefix = 'tool:'

    def __init__(self, config: Config = None, parent=None, name='Checker'):
        """
        Checker 초기화

        Args:
            config: 설정 컴포넌트 (None이면 기본 설정 파일 로드)
            parent: 부모 컴포넌트
            name: 컴포넌트 이름
        """
        super().__init__(name, parent)
        self._config = config if config is not None else Config(parent=self)
        self.requirements = self._load_requirements()
        self.l.info('Checker 초기화됨 (%d개 도구): %s',
                    len(self.requirements), list(self.requirements))

    def _load_requirements(self) -> dict:
        """
        'tool:<이름>' 섹션에서 요구 사항 로드

        Raises:
            ValueError: 섹션이 min/max 키를 가진 dict가 아닐 때
        """
        requirements = {}
        for section in self._config.sections(Checker._section_prefix):
            tool = section[len(Checker._section_prefix):]
            bounds = self._config.get_config(section)
            if not isinstance(bounds, dict):
                raise ValueError(f'Section must be a mapping of min/max: {section}')
            minimum, maximum = (
                self._config.get_config(section, key, dtype=Version)
                if bounds.get(key) is not None else None
                for key in ('min', 'max')
            )
            requirements[tool] = Requirement(tool, minimum, maximum)
            self.l.debug('요구 사항 로드: %r', requirements[tool])
        return requirements

    def check(self, name: str, installed: Union[Version, str]) -> CheckResult:
        """
        도구 하나를 확인

        Args:
            name: 도구 이름
            installed: 설치된 버전

        Returns:
            CheckResult: 확인 결과

        Raises:
            KeyError: 설정에 없는 도구
        """
        if name not in self.requirements:
            raise KeyError(f'Unknown tool: {name}')

        result = self.requirements[name].check(installed)
        if result.ok:
            self.l.info('%s %s: OK', name, result.installed)
        else:
            self.l.warning('%s: %s', name, result.reason)
        return result

    def check_all(self, installed: dict) -> dict:
        """
        설정된 모든 도구를 확인

        Args:
            installed: {도구 이름: 설치된 버전} 딕셔너리

        Returns:
            dict: {도구 이름: CheckResult}
        """
        results = {}
        for name in self.requirements:
            if name not in installed:
                self.l.warning('%s: not installed', name)
                results[name] = CheckResult(name, None, False, 'not installed')
                continue
            results[name] = self.check(name, installed[name])
        return results
