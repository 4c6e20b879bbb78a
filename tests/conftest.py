"""Configuração do pytest para o projeto wabot-relay."""

import sys
from pathlib import Path

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
root_path = Path(__file__).parent.parent
src_path = root_path / "src"
for path in (src_path, root_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
