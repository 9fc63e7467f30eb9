from backoffice import get_db
from backoffice.models.catalog import Category, Subcategory
from backoffice.utils.validation import Field, Required, Nullable, String, Integer, Min, Max, Exists

CATEGORY_RULES = [
    Field('name', Required(), String(), Min(3), Max(255)),
    Field('description', Nullable(), String(), Min(3)),
]

SUBCATEGORY_RULES = [
    Field('category_id', Required(), Integer(), Exists(Category, get_db), cast=int),
    Field('name', Required(), String(), Min(3), Max(255)),
    Field('description', Nullable(), String(), Min(3)),
]

ARTICLE_RULES = [
    Field('name', Required(), String(), Min(3), Max(255)),
    Field('description', Nullable(), String(), Min(3)),
    Field('category_id', Required(), Integer(), Exists(Category, get_db), cast=int),
    Field('subcategory_id', Nullable(), Integer(), Exists(Subcategory, get_db), cast=int),
]
