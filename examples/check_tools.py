"""
도구 버전 확인 예시

실행 방법:
    python3 examples/check_tools.py
"""

import sys
import platform

from mcheck import Component, Requirement, Version


def main():
    root = Component('example')
    root.make_logger('INFO')

    installed = Version(platform.python_version())
    root.l.info('Python %s (components=%s, suffixes=%s)',
                installed, installed.components, installed.suffixes)

    # 3.8 이상, 3.13.x 이하
    result = Requirement('python', minimum='3.8', maximum='3.13').check(installed)
    if result.ok:
        root.l.info('python OK')
        return 0
    root.l.warning('python: %s', result.reason)
    return 1


if __name__ == '__main__':
    sys.exit(main())
