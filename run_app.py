"""
Streamlit app runner script

Usage:
    streamlit run run_app.py
"""

import sys
from pathlib import Path

# プロジェクトルートをパスに追加（pip install なしで起動する場合）
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from aoc_core.logging_config import setup_logging
from app.main import main

setup_logging()
main()
