"""버전 문자열 파싱 및 비교 유틸리티"""

import re
from typing import Tuple, Union


# 숫자 세그먼트 판정 (ASCII 숫자만 인정)
_NUMERIC = re.compile(r'\d+', re.ASCII)


def _split(text: str, sep: str, keep_one: bool = False) -> Tuple[str, ...]:
    """
    문자열을 구분자로 분할 (끝의 빈 세그먼트 제거)

    빈 문자열은 빈 세그먼트 하나가 됩니다. 구분자만 있는 문자열(".")은
    keep_one이 True일 때만 빈 세그먼트 하나, 아니면 빈 튜플이 됩니다.

    Args:
        text: 분할할 문자열
        sep: 구분자
        keep_one: 결과가 비었을 때 빈 세그먼트 하나를 남길지 여부

    Returns:
        세그먼트 튜플
    """
    if not text:
        return ('',)
    parts = text.split(sep)
    while parts and parts[-1] == '':
        parts.pop()
    if not parts and keep_one:
        return ('',)
    return tuple(parts)


def _is_numeric(segment: str) -> bool:
    return _NUMERIC.fullmatch(segment) is not None


def _compare_segments(seg_a: str, seg_b: str) -> int:
    """
    세그먼트 하나를 비교

    숫자 세그먼트는 항상 비숫자 세그먼트보다 앞에 정렬됩니다.
    둘 다 숫자이면 정수로, 둘 다 비숫자이면 코드 포인트 순으로 비교합니다.
    """
    a_numeric = _is_numeric(seg_a)
    b_numeric = _is_numeric(seg_b)

    if a_numeric and not b_numeric:
        return -1
    if not a_numeric and b_numeric:
        return 1
    if a_numeric:
        a, b = int(seg_a), int(seg_b)
    else:
        a, b = seg_a, seg_b

    if a < b:
        return -1
    elif a > b:
        return 1
    return 0


def _compare_lists(list_a, list_b, pad_with_zeroes: bool) -> int:
    """
    세그먼트 리스트 비교

    Args:
        list_a: 첫 번째 세그먼트 리스트
        list_b: 두 번째 세그먼트 리스트
        pad_with_zeroes: True이면 짧은 쪽을 "0"으로 채워 비교,
                         False이면 짧은 쪽(접두어)이 앞에 정렬

    Returns:
        list_a < list_b: 음수
        list_a == list_b: 0
        list_a > list_b: 양수
    """
    # 비어 있는 리스트(pre-release 없음)는 항상 뒤로
    if not list_a and not list_b:
        return 0
    if list_a and not list_b:
        return -1
    if not list_a and list_b:
        return 1

    for i in range(max(len(list_a), len(list_b))):
        if not pad_with_zeroes and i >= len(list_a):
            return -1
        if not pad_with_zeroes and i >= len(list_b):
            return 1

        seg_a = list_a[i] if i < len(list_a) else '0'
        seg_b = list_b[i] if i < len(list_b) else '0'
        result = _compare_segments(seg_a, seg_b)
        if result != 0:
            return result
    return 0


def _normalize(segments, strip_zeroes: bool) -> tuple:
    """비교 결과와 일치하는 해시 키 생성"""
    key = [(0, int(s)) if _is_numeric(s) else (1, s) for s in segments]
    if strip_zeroes:
        while key and key[-1] == (0, 0):
            key.pop()
    return tuple(key)


class Version:
    """
    버전 값 객체

    "릴리스[-pre-release][+build-metadata]" 형식의 문자열을 파싱합니다.
    릴리스 구성 요소 개수에 제한이 없으며, 어떤 문자열이든 파싱에 성공합니다.

    비교 규칙:
        1. 릴리스 구성 요소를 "0"으로 채워 비교 (17 == 17.0 == 17.0.0)
        2. 같으면 pre-release를 채우지 않고 비교
           (pre-release가 있는 버전이 없는 버전보다 앞)
        3. build metadata는 비교에 사용하지 않음

    동등성(==)과 해시도 위 비교 규칙을 따릅니다.
    """

    __slots__ = ('_original', '_components', '_suffixes', '_build_metadata')

    def __init__(self, version_str: str):
        """
        버전 문자열로 Version 생성

        Args:
            version_str: 버전 문자열 (예: "17.1.2-beta.1+build.5")

        Raises:
            TypeError: version_str이 None일 때
        """
        if version_str is None:
            raise TypeError('version_str must not be None')

        core, sep, metadata = version_str.partition('+')
        release, sep_suffix, suffix = core.partition('-')

        set_attr = object.__setattr__
        set_attr(self, '_original', version_str)
        set_attr(self, '_build_metadata', metadata if sep else None)
        set_attr(self, '_components', _split(release, '.', keep_one=True))
        set_attr(self, '_suffixes', _split(suffix, '.') if sep_suffix else ())

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{type(self).__name__} is immutable')

    @property
    def original(self) -> str:
        return self._original

    @property
    def components(self) -> Tuple[str, ...]:
        return self._components

    @property
    def suffixes(self) -> Tuple[str, ...]:
        return self._suffixes

    @property
    def build_metadata(self):
        return self._build_metadata

    def __str__(self):
        return self._original

    def __repr__(self):
        return f'{type(self).__name__}({self._original!r})'

    @staticmethod
    def _coerce(other: Union['Version', str]) -> 'Version':
        if isinstance(other, Version):
            return other
        return Version(other)

# == Comparison ==

    def compare_to(self, other: 'Version') -> int:
        """
        다른 버전과 비교

        Args:
            other: 비교할 버전

        Returns:
            self < other: -1
            self == other: 0
            self > other: 1
        """
        result = _compare_lists(self._components, other._components, True)
        if result != 0:
            return result
        return _compare_lists(self._suffixes, other._suffixes, False)

    def __eq__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) == 0

    def __ne__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) != 0

    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self):
        return hash((_normalize(self._components, True),
                     _normalize(self._suffixes, False)))

# == Predicates ==

    def less_than_or_equal_to(self, other: Union['Version', str]) -> bool:
        return self.compare_to(self._coerce(other)) <= 0

    def greater_or_equal_to(self, other: Union['Version', str]) -> bool:
        return self.compare_to(self._coerce(other)) >= 0

    def greater_or_equal_to_ignoring_less_significant_numbers(self, other: Union['Version', str]) -> bool:
        """
        최대 허용 버전 확인용 비교

        other를 이 버전과 같은 구성 요소 개수로 잘라낸 뒤 비교합니다.
        예: Version("17.5")는 17, 17.5, 17.5.999에 대해 True, 17.6에 대해 False.
        잘라낸 경우 pre-release와 build metadata는 무시합니다.

        Args:
            other: 비교할 버전 (보통 설치된 버전)

        Returns:
            bool: 잘라낸 other보다 크거나 같으면 True
        """
        other = self._coerce(other)
        if len(other._components) <= len(self._components):
            return self.greater_or_equal_to(other)
        truncated = other._components[:len(self._components)]
        return _compare_lists(self._components, truncated, True) >= 0


def parse_version(version_str: str) -> Version:
    """
    버전 문자열을 파싱

    Args:
        version_str: 버전 문자열 (예: "1.0.0", "17.5", "2.0-rc.1+abc")

    Returns:
        Version 객체

    Raises:
        TypeError: version_str이 None일 때
    """
    return Version(version_str)


def is_valid_version(version_str) -> bool:
    """버전 문자열이 파싱 가능한지 확인 (None이 아닌 모든 문자열)"""
    try:
        parse_version(version_str)
        return True
    except (TypeError, AttributeError):
        return False


def compare_versions(v1: Union[Version, str], v2: Union[Version, str]) -> int:
    """
    두 버전을 비교

    Args:
        v1: 첫 번째 버전 (문자열 또는 Version)
        v2: 두 번째 버전 (문자열 또는 Version)

    Returns:
        v1 > v2: 1
        v1 == v2: 0
        v1 < v2: -1
    """
    return Version._coerce(v1).compare_to(Version._coerce(v2))
