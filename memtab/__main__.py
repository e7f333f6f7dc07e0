#!/usr/bin/env python3
"""
memtab - entry point script

Run the REPL:
    python -m memtab

Or use as a library:
    from memtab import CommandInterpreter
    interpreter = CommandInterpreter()
    interpreter.process("CREATE TABLE t id:int")
"""

from memtab.core.repl import main

if __name__ == '__main__':
    main()
