from modular_pages.extensions import db
from .base import BaseModel


class Page(BaseModel):
    __tablename__ = 'pages'

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    status = db.Column(db.String(50), default='draft', index=True)
    # Per-page section layout overrides, e.g. {"sidebar": "1/3"}
    layout = db.Column(db.JSON(none_as_null=True), default=dict)

    # Modules in CMS-declared order (cascade deletes)
    modules = db.relationship(
        "PageModule",
        back_populates="page",
        order_by="PageModule.order",
        cascade="all, delete-orphan"
    )
