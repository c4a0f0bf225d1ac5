from typing import Any, ClassVar, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _LabelledEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")
    label: str = ""

    @model_validator(mode="before")
    @classmethod
    def _coerce_label(cls, value: Any) -> Any:
        # Stored records use `option` for options and `item` for extras/addons.
        if isinstance(value, str):
            return {"label": value}
        if isinstance(value, dict) and "label" not in value:
            data = dict(value)
            data["label"] = data.get("option") or data.get("item") or data.get("name") or ""
            return data
        return value


class Option(_LabelledEntry):
    price: float = 0.0


class Extra(_LabelledEntry):
    price: float = 0.0


class Addon(_LabelledEntry):
    pass


class MenuTranslation(BaseModel):
    """Display text overlay for a menu in one language."""

    CANONICAL_FIELDS: ClassVar[Dict[str, str]] = {
        "name": "menu_name",
        "description": "menu_description",
    }
    INDEXED_FIELDS: ClassVar[tuple] = ()

    name: Optional[str] = None
    description: Optional[str] = None


class CategoryTranslation(BaseModel):
    """Display text overlay for a category; arrays align with the category's extras/addons."""

    CANONICAL_FIELDS: ClassVar[Dict[str, str]] = {
        "name": "cat_name",
        "description": "cat_description",
        "header": "cat_header",
        "footer": "cat_footer",
    }
    INDEXED_FIELDS: ClassVar[tuple] = ("extras", "addons")

    name: Optional[str] = None
    description: Optional[str] = None
    header: Optional[str] = None
    footer: Optional[str] = None
    extras: List[str] = Field(default_factory=list)
    addons: List[str] = Field(default_factory=list)


class ItemTranslation(BaseModel):
    """Display text overlay for an item; arrays align with the item's options/extras/addons."""

    CANONICAL_FIELDS: ClassVar[Dict[str, str]] = {
        "name": "item_name",
        "description": "item_description",
    }
    INDEXED_FIELDS: ClassVar[tuple] = ("options", "extras", "addons")

    name: Optional[str] = None
    description: Optional[str] = None
    options: List[str] = Field(default_factory=list)
    extras: List[str] = Field(default_factory=list)
    addons: List[str] = Field(default_factory=list)


class Item(BaseModel):
    TRANSLATION_MODEL: ClassVar[type] = ItemTranslation

    id: str
    item_name: str = ""
    item_description: str = ""
    item_price: float = 0.0
    item_order: float = 0
    is_active: bool = True
    vegetarian: bool = False
    vegan: bool = False
    spicy: bool = False
    allergies: List[str] = Field(default_factory=list)
    options: List[Option] = Field(default_factory=list)
    extras: List[Extra] = Field(default_factory=list)
    addons: List[Addon] = Field(default_factory=list)
    translations: Dict[str, ItemTranslation] = Field(default_factory=dict)

    @property
    def price_from_options(self) -> bool:
        return self.item_price == 0 and bool(self.options)


class Category(BaseModel):
    TRANSLATION_MODEL: ClassVar[type] = CategoryTranslation

    id: str
    cat_name: str = ""
    cat_description: str = ""
    cat_header: str = ""
    cat_footer: str = ""
    cat_order: float = 0
    items: List[Item] = Field(default_factory=list)
    extras: List[Extra] = Field(default_factory=list)
    addons: List[Addon] = Field(default_factory=list)
    translations: Dict[str, CategoryTranslation] = Field(default_factory=dict)


class Menu(BaseModel):
    TRANSLATION_MODEL: ClassVar[type] = MenuTranslation

    id: str
    menu_name: str = "Untitled Menu"
    menu_description: str = ""
    menu_type: Literal["web", "printable"] = "web"
    categories: List[Category] = Field(default_factory=list)
    last_updated: str = ""
    published_url: Optional[str] = None
    languages: List[str] = Field(default_factory=list)
    default_language: str = "en"
    translations: Dict[str, MenuTranslation] = Field(default_factory=dict)
    rejected_items: List[str] = Field(default_factory=list)


class PublishedMenuSummary(BaseModel):
    id: str
    name: str
    description: str = ""
    url: str = ""
    last_updated: str = ""
    slug: Optional[str] = None
    order: float = 0
    translations: Dict[str, MenuTranslation] = Field(default_factory=dict)


class ExportRequest(BaseModel):
    # Loosely typed: the export service answers bad input with a failure envelope.
    model_config = ConfigDict(populate_by_name=True)
    menu_id: Optional[Any] = Field(default=None, alias="menuId")
    action: Optional[Any] = None


class ExportResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")
    success: bool
    message: str
    action: str = "unknown"
    menu_id: str = Field(default="unknown", alias="menuId")
    url: Optional[str] = None
    languages: Optional[List[str]] = None
    skipped: Optional[List[str]] = None


class TranslateItemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    item_id: Optional[str] = Field(default=None, alias="itemId")
    target_language: Optional[str] = Field(default=None, alias="targetLanguage")


class TranslateCategoryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    category_id: Optional[str] = Field(default=None, alias="categoryId")
    target_language: Optional[str] = Field(default=None, alias="targetLanguage")


class TranslateMenuRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    menu_id: Optional[str] = Field(default=None, alias="menuId")
    target_language: Optional[str] = Field(default=None, alias="targetLanguage")


class TranslateResponse(BaseModel):
    success: bool = True
    translation: Dict[str, Any]
    message: str
    cached: bool = False


class ImageResizeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    id: Optional[str] = None
    image_data: Optional[str] = Field(default=None, alias="imageData")
    aspect_ratio: Optional[str] = Field(default=None, alias="aspectRatio")
    kind: Optional[str] = "menu"
