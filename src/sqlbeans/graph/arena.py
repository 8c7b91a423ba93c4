"""Identity-keyed storage for the beans and properties of one build."""

from typing import Dict, List, Optional, Tuple

from sqlbeans.errors import UnresolvableReferenceError
from sqlbeans.metadata import Bean, BeanKey, BeanProperty, ForeignBeanField, PropertyKey


class BeanGraph:
    """Owns every bean and property of a build, addressed by identity key.

    Entities reference each other through keys only; ``bean`` and ``property`` resolve
    them. Beans are kept in first-seen order.
    """

    def __init__(self) -> None:
        """Start with an empty graph."""
        self._beans: Dict[BeanKey, Bean] = {}
        self._properties: Dict[PropertyKey, BeanProperty] = {}

    def fetch_or_create_bean(self, key: BeanKey, comment: Optional[str] = None) -> Bean:
        """Return the bean for ``key``, creating it on first use."""
        bean = self._beans.get(key)
        if bean is None:
            bean = Bean(key=key, comment=comment)
            self._beans[key] = bean
        return bean

    def fetch_or_create_property(self, key: PropertyKey) -> Tuple[BeanProperty, bool]:
        """Return the property for ``key`` and whether it was just created.

        A new property is appended to its owning bean, which must already exist.
        """
        prop = self._properties.get(key)
        if prop is not None:
            return prop, False
        bean = self.get_bean(key.bean)
        prop = BeanProperty(key=key, sql_name=key.column_name, belongs_to_bean=key.bean)
        self._properties[key] = prop
        bean.properties.append(prop)
        return prop, True

    def get_bean(self, key: BeanKey) -> Bean:
        bean = self._beans.get(key)
        if bean is None:
            raise UnresolvableReferenceError(
                "Unknown table",
                table_schema=key.schema_name,
                table_name=key.table_name,
            )
        return bean

    def get_property(self, key: PropertyKey) -> BeanProperty:
        prop = self._properties.get(key)
        if prop is None:
            raise UnresolvableReferenceError(
                "Unknown column",
                table_schema=key.bean.schema_name,
                table_name=key.bean.table_name,
                column_name=key.column_name,
            )
        return prop

    def has_bean(self, key: BeanKey) -> bool:
        return key in self._beans

    def has_property(self, key: PropertyKey) -> bool:
        return key in self._properties

    @property
    def beans(self) -> List[Bean]:
        return list(self._beans.values())

    @property
    def properties(self) -> List[BeanProperty]:
        return list(self._properties.values())

    def resolve_target(self, field: ForeignBeanField) -> Bean:
        """Return the bean a foreign field points at."""
        return self.get_bean(field.to_bean)

    def resolve_with(self, field: ForeignBeanField) -> BeanProperty:
        return self.get_property(field.with_property)

    def resolve_on(self, field: ForeignBeanField) -> BeanProperty:
        return self.get_property(field.on_property)

    def __len__(self) -> int:
        return len(self._beans)

    def __iter__(self):
        return iter(self.beans)
