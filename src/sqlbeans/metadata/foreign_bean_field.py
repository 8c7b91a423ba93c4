from pydantic import BaseModel

from .keys import BeanKey, PropertyKey


class ForeignBeanField(BaseModel):
    """Directed relationship edge between two beans.

    A forward field lives on the referencing bean and points at the referenced one.
    Its mirror lives on the referenced bean, swaps ``with_property`` and
    ``on_property``, and is array-valued.

    Attributes:
        to_bean: Key of the bean this field points at.
        with_property: Property on the bean that owns this field.
        on_property: Property on ``to_bean`` that ``with_property`` joins to.
        is_array: True for the one-to-many mirror of a foreign key.
    """

    to_bean: BeanKey
    with_property: PropertyKey
    on_property: PropertyKey
    is_array: bool = False

    model_config = {"frozen": True}

    def mirrored(self, owner: BeanKey) -> "ForeignBeanField":
        """Return the edge seen from ``to_bean`` back to ``owner``."""
        return ForeignBeanField(
            to_bean=owner,
            with_property=self.on_property,
            on_property=self.with_property,
            is_array=not self.is_array,
        )
