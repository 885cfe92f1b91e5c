from modular_pages.extensions import db
from .base import BaseModel


class PageModule(BaseModel):
    __tablename__ = "page_modules"

    page_id = db.Column(db.String(36), db.ForeignKey("pages.id"), nullable=False)
    type = db.Column(db.String(100), nullable=False)  # hero, cta, testimonials, ...
    title = db.Column(db.String(200), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0)
    placement = db.Column(db.String(50), nullable=True)  # header, main, sidebar, footer
    requires_auth = db.Column(db.Boolean, default=False)
    settings = db.Column(db.JSON, default=dict)
    payload = db.Column(db.JSON, default=dict)  # variant fields: testimonials, stats, items, ...

    page = db.relationship("Page", back_populates="modules")

    __table_args__ = (
        db.Index("idx_page_module_page_order", "page_id", "order"),
    )

    def to_record(self):
        """Raw CMS record as consumed by the render pipeline."""
        record = dict(self.payload or {})
        record.update({
            "id": self.id,
            "type": self.type,
            "order": self.order,
            "settings": self.settings or {},
            "requires_auth": bool(self.requires_auth),
        })
        if self.title is not None:
            record["title"] = self.title
        if self.placement is not None:
            record["placement"] = self.placement
        return record
