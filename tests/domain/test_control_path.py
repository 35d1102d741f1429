import unittest

from keyonnx.domain.utils._control_path import MethodKey, create_path_builder


class TestCreatePathBuilder(unittest.TestCase):
    def setUp(self) -> None:
        # Fresh builder per test to avoid map-sharing across tests.
        self.decorator = create_path_builder()

    def test_state_must_be_hashable(self) -> None:
        class C:
            @property
            def _state(self):
                return "A"

            def foo(self, x: int) -> int:
                return x

        with self.assertRaises(TypeError) as ctx:
            # list is unhashable
            self.decorator(C, C.foo, ["not-hashable"])(lambda self, x: x)

        self.assertIn("must be hashable", str(ctx.exception))

    def test_dispatch_selects_registered_control_path(self) -> None:
        class C:
            def __init__(self, st):
                self.__st = st

            @property
            def _state(self):
                return self.__st

            def foo(self, x: int) -> int:
                # base implementation never used once wrapper installed
                return -999

        @self.decorator(C, C.foo, "A")
        def foo_A(self, x: int) -> int:
            return x + 10

        @self.decorator(C, C.foo, "B")
        def foo_B(self, x: int) -> int:
            return x + 20

        self.assertEqual(C("A").foo(1), 11)
        self.assertEqual(C("B").foo(1), 21)

    def test_implementation_receives_the_receiver(self) -> None:
        class C:
            _state = "A"

            def __init__(self, base):
                self.base = base

            def foo(self, x: int) -> int:
                return -999

        @self.decorator(C, C.foo, "A")
        def foo_A(self, x: int) -> int:
            return self.base + x

        self.assertEqual(C(100).foo(5), 105)

    def test_custom_state_attribute(self) -> None:
        family_path = create_path_builder("family")

        class C:
            def __init__(self, family):
                self.family = family

            def kind(self) -> str:
                return "base"

        @family_path(C, C.kind, "fixed")
        def kind_fixed(self) -> str:
            return "fixed"

        self.assertEqual(C("fixed").kind(), "fixed")

    def test_missing_state_property_raises_not_implemented(self) -> None:
        class C:
            # No _state property on purpose
            def foo(self, x: int) -> int:
                return x

        @self.decorator(C, C.foo, "A")
        def foo_A(self, x: int) -> int:
            return x + 1

        with self.assertRaises(NotImplementedError) as ctx:
            C().foo(1)

        self.assertIn("missing attribute", str(ctx.exception))
        self.assertIn("'_state'", str(ctx.exception))

    def test_missing_control_path_without_trap_raises_not_implemented(self) -> None:
        class C:
            _state = "B"

            def foo(self) -> int:
                return 0

        @self.decorator(C, C.foo, "A")
        def foo_A(self) -> int:
            return 1

        with self.assertRaises(NotImplementedError) as ctx:
            C().foo()

        self.assertIn("Missing control path", str(ctx.exception))
        self.assertIn("state='B'", str(ctx.exception))

    def test_trap_exception_instance_is_raised(self) -> None:
        class MissingPathError(Exception):
            pass

        class C:
            _state = "B"

            def foo(self) -> int:
                return 0

        @self.decorator(C, C.foo, "A", MissingPathError("no path"))
        def foo_A(self) -> int:
            return 1

        with self.assertRaises(MissingPathError):
            C().foo()

    def test_trap_callable_receives_base_method_and_state(self) -> None:
        calls = {}

        class TrapError(Exception):
            pass

        def trap(method, state):
            calls["method_name"] = method.__name__
            calls["state"] = state
            raise TrapError("boom")

        class C:
            _state = "B"

            def foo(self) -> int:
                return 0

        @self.decorator(C, C.foo, "A", trap)
        def foo_A(self) -> int:
            return 1

        with self.assertRaises(TrapError) as ctx:
            C().foo()

        self.assertEqual(calls, {"method_name": "foo", "state": "B"})
        self.assertIn("boom", str(ctx.exception))

    def test_trap_callable_that_returns_falls_back_to_not_implemented(self) -> None:
        class C:
            _state = "B"

            def foo(self) -> int:
                return 0

        @self.decorator(C, C.foo, "A", lambda method, state: None)
        def foo_A(self) -> int:
            return 1

        with self.assertRaises(NotImplementedError):
            C().foo()

    def test_wrapper_preserves_original_method_metadata(self) -> None:
        class C:
            _state = "A"

            def foo(self) -> int:
                """Original foo docstring."""
                return 0

        @self.decorator(C, C.foo, "A")
        def foo_A(self) -> int:
            return 1

        # Registering against the installed wrapper keeps the base metadata.
        @self.decorator(C, C.foo, "B")
        def foo_B(self) -> int:
            return 2

        self.assertEqual(C.foo.__name__, "foo")
        self.assertEqual(C.foo.__doc__, "Original foo docstring.")

    def test_two_builders_do_not_share_control_paths(self) -> None:
        other = create_path_builder()

        class C:
            def __init__(self, st):
                self._state = st

            def foo(self, x: int) -> int:
                return -1

        @self.decorator(C, C.foo, "A")
        def foo_A(self, x: int) -> int:
            return 111

        @other(C, C.foo, "B")
        def foo_B(self, x: int) -> int:
            return 222

        # The class now holds the second builder's wrapper.
        with self.assertRaises(NotImplementedError):
            C("A").foo(0)
        self.assertEqual(C("B").foo(0), 222)

    def test_method_key_fields(self) -> None:
        key = MethodKey("Tensor", "exp", "fixed")
        self.assertEqual(key.ClassName, "Tensor")
        self.assertEqual(key.MethodName, "exp")
        self.assertEqual(key.StateVal, "fixed")


if __name__ == "__main__":
    unittest.main()
