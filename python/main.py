#!/usr/bin/env python3
"""z3 - 標準入力をS3へアップロードするエントリーポイント"""
import sys

from z3_uploader.cli import main


if __name__ == "__main__":
    sys.exit(main())
