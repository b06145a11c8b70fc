"""
명령행 관리 모듈

버전 비교 및 요구 사항 확인 명령을 제공합니다.
"""

import sys
import argparse

from mcheck.component import Component
from mcheck.config import Config
from mcheck.requirement import Checker
from mcheck.version import compare_versions


def parse_args(argv=None):
    """
    명령행 인자 파싱

    Args:
        argv: 명령행 인자 리스트 (None이면 sys.argv[1:] 사용)

    Returns:
        argparse.Namespace: 파싱된 인자
    """
    parser = argparse.ArgumentParser(prog='mcheck')
    parser.add_argument('-l', '--log_level', dest='log_level', help='Log level', default='WARNING')
    subparsers = parser.add_subparsers(dest='mode', required=True)

    p_compare = subparsers.add_parser('compare', help='Compare two versions')
    p_compare.add_argument('version_a', help='First version')
    p_compare.add_argument('version_b', help='Second version')

    p_check = subparsers.add_parser('check', help='Check installed tool versions')
    p_check.add_argument('-c', '--config_file', dest='config_file', help='Config file path',
                         default=None)
    p_check.add_argument('installed', nargs='*', metavar='TOOL=VERSION',
                         help='Installed tool versions')

    return parser.parse_args(argv)


def _parse_installed(pairs) -> dict:
    """
    'TOOL=VERSION' 목록을 dict로 변환

    Raises:
        ValueError: '='가 없는 항목
    """
    installed = {}
    for pair in pairs:
        name, sep, version = pair.partition('=')
        if not sep:
            raise ValueError(f'Expected TOOL=VERSION, got: {pair!r}')
        installed[name.strip()] = version.strip()
    return installed


def main(argv=None) -> int:
    """
    mcheck 진입점

    Returns:
        int: 종료 코드 (요구 사항을 모두 만족하면 0, 아니면 1)
    """
    args = parse_args(sys.argv[1:] if argv is None else argv)

    if args.mode == 'compare':
        result = compare_versions(args.version_a, args.version_b)
        print({-1: '<', 0: '=', 1: '>'}[result])
        return 0

    root = Component('mcheck')
    root.make_logger(args.log_level)
    try:
        installed = _parse_installed(args.installed)
        checker = Checker(Config(args.config_file, parent=root), parent=root)
    except ValueError as e:
        root.l.error('%s', e)
        return 2

    results = checker.check_all(installed)
    for name, result in results.items():
        status = 'OK' if result.ok else 'FAIL'
        detail = f' ({result.reason})' if result.reason else ''
        print(f'{status} {name} {result.installed or "-"}{detail}')
    return 0 if all(r.ok for r in results.values()) else 1


if __name__ == '__main__':
    sys.exit(main())
