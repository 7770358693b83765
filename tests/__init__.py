"""ROLODEX test suite.

Folder taxonomy
- unit/      : Isolated, fast checks of a single module/class/function.
- contract/  : Behaviour every repository adapter must share, parametrized by backend.
- fixtures/  : Shared data factories loaded through `pytest_plugins` (no tests here).

Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
