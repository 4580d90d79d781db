'''KR: 테스트 트리 픽스처. EN: Pytest tree fixtures.'''

from __future__ import annotations

from pathlib import Path

import pytest

from src.visitor import CancellationToken
from tests.fixtures.virtual_fs import create_virtual_tree


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    '''샘플 디렉터리 트리를 구성한다(KR). Provision a sample directory tree (EN).'''

    root = tmp_path / 'tree'
    create_virtual_tree(
        root,
        {
            'a.txt': 'alpha\n',
            'b.py': 'print(1)\n',
            'docs/guide.md': '# guide\n',
            'docs/deep/notes.txt': 'notes\n',
            'src/main.py': 'print(2)\n',
            'src/util.py': 'print(3)\n',
        },
    )
    (root / 'empty').mkdir()
    return root


@pytest.fixture
def token() -> CancellationToken:
    '''새 취소 토큰(KR). Fresh cancellation token (EN).'''

    return CancellationToken()
