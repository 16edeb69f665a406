# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp


X = tp.TypeVar("X")


# pylint does not understand Dict[str, X],
# so we reimplement the MutableMapping interface
class Registry(tp.MutableMapping[str, X]):
    """Named objects (eg: operator presets) stored as a dict, each with
    an optional dict of information which can be used for selection.
    """

    def __init__(self) -> None:
        super().__init__()
        self.data: tp.Dict[str, X] = {}
        self._information: tp.Dict[str, tp.Dict[str, tp.Any]] = {}

    def register_name(self, name: str, obj: X, info: tp.Optional[tp.Dict[str, tp.Any]] = None) -> None:
        """Register an object with a provided name"""
        if name in self:
            raise RuntimeError(f'Encountered a name collision "{name}"')
        self[name] = obj
        if info is not None:
            assert isinstance(info, dict)
            self._information[name] = dict(info)

    def unregister(self, name: str) -> None:
        """Remove a previously-registered object, e.g. so you can
        re-register it in a Jupyter notebook.
        """
        if name in self:
            del self[name]
        self._information.pop(name, None)

    def get_info(self, name: str) -> tp.Dict[str, tp.Any]:
        if name not in self:
            raise ValueError(f'"{name}" is not registered.')
        return self._information.setdefault(name, {})

    def select(self, **info: tp.Any) -> tp.List[str]:
        """Names of the registered objects whose information match all the provided values"""
        return sorted(
            name
            for name in self
            if all(self._information.get(name, {}).get(key) == value for key, value in info.items())
        )

    def __getitem__(self, key: str) -> X:
        return self.data[key]

    def __setitem__(self, key: str, value: X) -> None:
        self.data[key] = value

    def __delitem__(self, key: str) -> None:
        del self.data[key]

    def __iter__(self) -> tp.Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)
