import typing


class ObjectDict(dict):
    # A read-only dict whose keys are also reachable as attributes. Nested plain dicts are wrapped on access.

    def __getattr__(self, name: str) -> typing.Any:
        try:
            value = self[name]
        except KeyError:
            raise AttributeError(name)
        if type(value) == dict:
            return ObjectDict(value)
        return value

    def __setattr__(self, name: str, value: typing.Any) -> None:
        raise AttributeError(f'{self.__class__.__name__} is read-only')

    def __setitem__(self, name: str, value: typing.Any) -> None:
        raise TypeError(f'{self.__class__.__name__} is read-only')

    def __delitem__(self, name: str) -> None:
        raise TypeError(f'{self.__class__.__name__} is read-only')

    def __ior__(self, other: typing.Any) -> typing.Self:
        raise TypeError(f'{self.__class__.__name__} is read-only')

    def clear(self) -> None:
        raise TypeError(f'{self.__class__.__name__} is read-only')

    def pop(self, *args: typing.Any) -> typing.Any:
        raise TypeError(f'{self.__class__.__name__} is read-only')

    def popitem(self) -> typing.Any:
        raise TypeError(f'{self.__class__.__name__} is read-only')

    def setdefault(self, *args: typing.Any) -> typing.Any:
        raise TypeError(f'{self.__class__.__name__} is read-only')

    def update(self, *args: typing.Any, **kwargs: typing.Any) -> None:
        raise TypeError(f'{self.__class__.__name__} is read-only')

    def __hash__(self) -> int:
        return hash(tuple(sorted((k, v) for k, v in self.items() if type(v) != dict)))
