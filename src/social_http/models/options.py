from abc import ABC, abstractmethod
from typing import Optional

from .http import BodyData, ParametersInput, QueryParameters


class NotGiven:
    """Marks an argument the caller did not pass, as opposed to an explicit ``None``."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_GIVEN"


NOT_GIVEN = NotGiven()


class ReadOptions(ABC):
    """Options that can describe the query string of a request."""

    @abstractmethod
    def get_query_parameters(self) -> Optional[ParametersInput]:
        """Return the query parameters for the request.

        Any shape accepted by ``QueryParameters.from_input`` may be returned.
        """

    def query_parameters(self) -> Optional[QueryParameters]:
        return QueryParameters.from_input(self.get_query_parameters())


class WriteOptions(ReadOptions):
    """Options that can also describe the body of a POST/PUT/PATCH/DELETE request."""

    @abstractmethod
    def get_body_data(self) -> Optional[ParametersInput]:
        """Return the body data for the request.

        Any shape accepted by ``BodyData.from_input`` may be returned.
        """

    def body_data(self) -> Optional[BodyData]:
        return BodyData.from_input(self.get_body_data())
