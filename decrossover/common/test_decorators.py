# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from unittest import TestCase
import numpy as np
from . import decorators


class RegistryTests(TestCase):

    def test_registry(self) -> None:
        presets: decorators.Registry[int] = decorators.Registry()
        other: decorators.Registry[int] = decorators.Registry()
        presets.register_name("twelve", 12)
        np.testing.assert_equal(presets["twelve"], 12)
        np.testing.assert_array_equal(list(presets.keys()), ["twelve"])
        np.testing.assert_array_equal(list(other.keys()), [])
        presets.unregister("twelve")
        presets.unregister("other_name_that_does_not_exist")
        np.testing.assert_array_equal(list(presets.keys()), [])

    def test_info_registry(self) -> None:
        presets: decorators.Registry[int] = decorators.Registry()
        presets.register_name("ten", 10, info={"tag": "info"})
        np.testing.assert_equal(presets.get_info("ten"), {"tag": "info"})
        np.testing.assert_raises(ValueError, presets.get_info, "no_dummy")

    def test_registry_error(self) -> None:
        presets: decorators.Registry[int] = decorators.Registry()
        presets.register_name("twelve", 12)
        np.testing.assert_raises(RuntimeError, presets.register_name, "twelve", 13)

    def test_select(self) -> None:
        presets: decorators.Registry[int] = decorators.Registry()
        presets.register_name("b", 1, info={"topology": "BIN", "vectors": 1})
        presets.register_name("a", 2, info={"topology": "BIN", "vectors": 2})
        presets.register_name("c", 3, info={"topology": "EXP", "vectors": 1})
        presets.register_name("d", 4)
        self.assertEqual(presets.select(topology="BIN"), ["a", "b"])
        self.assertEqual(presets.select(topology="EXP", vectors=1), ["c"])
        self.assertEqual(presets.select(), ["a", "b", "c", "d"])
        self.assertEqual(presets.select(topology="none"), [])
