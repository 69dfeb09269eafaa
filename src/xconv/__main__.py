"""Module entry point: python -m xconv"""

from xconv.app import main

main()
