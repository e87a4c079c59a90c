"""CARBOOK test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior enforced across every store/id-generator implementation.
- integration/  : Real SQLite databases, migrations and units of work.
- functional/   : User-visible CLI flows driven through click's CliRunner.
- e2e/          : Top-level CLI logging behavior (verbosity, flight recorder).
- fixtures/     : Pytest plugins shared by every folder (SQLite engines, payloads).
- helpers/      : Shared utilities such as fake clocks (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes over mocks at boundaries.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- The folder marks (unit, contract, ...) are applied by the root conftest.
"""
