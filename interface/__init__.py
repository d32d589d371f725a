"""
Interface package: the text protocol front-end of the engine.

Modules:
    uci — Line-oriented command loop. Reads moves from stdin, writes replies
          to stdout. Can be run as a standalone script:
          python interface/uci.py black
"""
