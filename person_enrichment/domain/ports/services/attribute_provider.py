from abc import ABC, abstractmethod
from typing import Union


class AttributeProvider(ABC):
    """Looks up a single inferred attribute for a first name.

    Implementations raise ``ProviderError`` when the lookup yields no usable data.
    """

    name: str

    @abstractmethod
    async def fetch(self, name: str) -> Union[int, str]:
        pass
