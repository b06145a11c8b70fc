"""pytest 설정 및 공통 픽스처"""

import pytest
import tempfile
import shutil
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))


@pytest.fixture
def temp_dir():
    """
    임시 디렉토리 생성 및 테스트 후 자동 정리

    Yields:
        Path: 임시 디렉토리 경로
    """
    temp_path = Path(tempfile.mkdtemp(prefix='mcheck_test_'))
    yield temp_path
    # 테스트 후 정리
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def config_file(temp_dir):
    """
    도구 요구 사항이 담긴 JSON 설정 파일 생성

    Returns:
        Path: 설정 파일 경로
    """
    import json

    config_data = {
        'tool:gcc': {'min': '11', 'max': '13.2'},
        'tool:cmake': {'min': '3.20'},
        'tool:java': {'max': 17},
        'general': {'log_level': 'DEBUG'},
    }
    path = temp_dir / 'mcheck.json'
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(config_data, f, indent=2, ensure_ascii=False)
    return path
