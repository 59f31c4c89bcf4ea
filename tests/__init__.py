"""UTOPIA GATEWAY test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Several real components wired together (credentials on disk,
                  protobuf wire messages, the bootstrap), with the peer faked.
- e2e/          : The command-line interface driven through Click's runner.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic; prefer fakes over mocks at boundaries.
- Nothing here talks to a real peer. `tests.fakes` provides an in-memory
  utopiamaker ledger and a fake gateway peer that speaks the wire protocol.
- Markers: unit, integration, e2e (added by each folder's conftest).
"""
