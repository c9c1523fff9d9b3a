"""
Launcher tests.

Test suites for the launcher components:
- Runtime resolver
- Classpath assembler
- Argument planner
- Process launcher and subprocess backend
- Settings and CLI
"""
