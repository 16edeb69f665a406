# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.


# base classes


class DECrossoverError(Exception):
    """Base class for error raised by decrossover"""


class DECrossoverWarning(Warning):
    pass


# errors
# pylint: disable=too-many-ancestors


class InvalidConfigurationError(ValueError, DECrossoverError):
    """Operator, variant or bounds configuration is not valid"""


class PreconditionError(RuntimeError, DECrossoverError):
    """The inputs provided to an operation do not satisfy its contract"""


class NonFiniteValueError(ArithmeticError, DECrossoverError):
    """A non-finite value cannot be projected into its bounds"""


# warnings


class InefficientSettingsWarning(RuntimeWarning, DECrossoverWarning):
    """Operator settings are outside of their conventional range"""
