"""Car value object implementing the prototype port."""
from pydantic import BaseModel, ConfigDict

from showcase.domain.core.formatting import format_real

from .prototype import Prototype


class Car(BaseModel, Prototype):
    """A cloneable product with a mutable price.

    Two cars compare equal when their fields are equal, so a fresh clone is
    equal to its source until either one is mutated.
    """

    model_config = ConfigDict(
        frozen=False,  # price is mutable after cloning
        validate_assignment=True,
    )

    model: str
    price: float

    def clone(self) -> "Car":
        """Return a deep copy that shares no state with this car."""
        return self.model_copy(deep=True)

    def set_price(self, new_price: float) -> None:
        """Update the price in place."""
        self.price = new_price

    def __str__(self) -> str:
        return f"Car{{model='{self.model}', price={format_real(self.price)}}}"
