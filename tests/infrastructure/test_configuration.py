import logging
import os
import tempfile
import unittest
from unittest import TestCase

from keyonnx.domain.dtype._dtype import DType
from keyonnx.infrastructure._configuration import EngineConfig, get_config, set_config
from keyonnx.infrastructure.budget import StepBudget, UnlimitedBudget


class TestEngineConfigDefaults(TestCase):
    def test_defaults(self):
        config = EngineConfig()
        self.assertEqual(config.default_fixed_dtype, "fp16x16")
        self.assertIs(config.fixed_dtype, DType.FP16X16)
        self.assertIsNone(config.step_budget)
        self.assertEqual(config.logging_level, logging.WARNING)
        self.assertTrue(config.warn_on_broadcast_divergence)

    def test_values_are_normalized(self):
        config = EngineConfig(default_fixed_dtype="FP32x32", log_level="debug")
        self.assertEqual(config.default_fixed_dtype, "fp32x32")
        self.assertEqual(config.log_level, "DEBUG")

    def test_invalid_values(self):
        for kwargs in (
            {"default_fixed_dtype": "i32"},
            {"default_fixed_dtype": "float"},
            {"step_budget": -1},
            {"step_budget": 1.5},
            {"step_budget": True},
            {"log_level": "verbose"},
            {"warn_on_broadcast_divergence": "yes"},
        ):
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(ValueError):
                    EngineConfig(**kwargs)

    def test_make_budget(self):
        self.assertIsInstance(EngineConfig().make_budget(), UnlimitedBudget)
        guard = EngineConfig(step_budget=5).make_budget()
        self.assertIsInstance(guard, StepBudget)
        self.assertEqual(guard.max_steps, 5)
        self.assertIsNot(guard, EngineConfig(step_budget=5).make_budget())


class TestEngineConfigLoad(TestCase):
    def _write(self, text: str) -> str:
        fd, path = tempfile.mkstemp(suffix=".toml")
        with os.fdopen(fd, "w") as f:
            f.write(text)
        self.addCleanup(os.remove, path)
        return path

    def test_load_from_toml(self):
        path = self._write(
            "[keyonnx]\n"
            'default_fixed_dtype = "fp64x64"\n'
            "step_budget = 1000\n"
            'log_level = "INFO"\n'
            "warn_on_broadcast_divergence = false\n"
        )
        config = EngineConfig.load(path)
        self.assertIs(config.fixed_dtype, DType.FP64X64)
        self.assertEqual(config.step_budget, 1000)
        self.assertEqual(config.logging_level, logging.INFO)
        self.assertFalse(config.warn_on_broadcast_divergence)

    def test_missing_table_keeps_defaults(self):
        path = self._write('[other]\nname = "x"\n')
        self.assertEqual(EngineConfig.load(path), EngineConfig())

    def test_unknown_keys_are_rejected(self):
        path = self._write("[keyonnx]\nthreads = 4\n")
        with self.assertRaises(ValueError):
            EngineConfig.load(path)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            EngineConfig.load(os.path.join(tempfile.gettempdir(), "keyonnx-missing.toml"))


class TestEngineConfigFromEnv(TestCase):
    def test_reads_prefixed_variables(self):
        config = EngineConfig.from_env(
            {
                "KEYONNX_DEFAULT_FIXED_DTYPE": "fp8x23",
                "KEYONNX_STEP_BUDGET": "250",
                "KEYONNX_LOG_LEVEL": "error",
                "KEYONNX_WARN_ON_BROADCAST_DIVERGENCE": "off",
                "UNRELATED": "1",
            }
        )
        self.assertIs(config.fixed_dtype, DType.FP8X23)
        self.assertEqual(config.step_budget, 250)
        self.assertEqual(config.log_level, "ERROR")
        self.assertFalse(config.warn_on_broadcast_divergence)

    def test_unlimited_budget_spellings(self):
        for raw in ("", "none", "Unlimited"):
            with self.subTest(raw=raw):
                config = EngineConfig.from_env({"KEYONNX_STEP_BUDGET": raw})
                self.assertIsNone(config.step_budget)

    def test_empty_environment_gives_defaults(self):
        self.assertEqual(EngineConfig.from_env({}), EngineConfig())

    def test_invalid_variables(self):
        for env in (
            {"KEYONNX_STEP_BUDGET": "many"},
            {"KEYONNX_WARN_ON_BROADCAST_DIVERGENCE": "maybe"},
            {"KEYONNX_DEFAULT_FIXED_DTYPE": "u32"},
        ):
            with self.subTest(env=env):
                with self.assertRaises(ValueError):
                    EngineConfig.from_env(env)


class TestActiveConfig(TestCase):
    def tearDown(self) -> None:
        set_config(EngineConfig())

    def test_set_config_returns_previous(self):
        first = EngineConfig(step_budget=1)
        set_config(first)
        previous = set_config(EngineConfig(step_budget=2))
        self.assertIs(previous, first)
        self.assertEqual(get_config().step_budget, 2)

    def test_set_config_type_check(self):
        with self.assertRaises(TypeError):
            set_config({"step_budget": 1})


if __name__ == "__main__":
    unittest.main()
