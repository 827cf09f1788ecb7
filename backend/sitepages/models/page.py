from sitepages.extensions import db
from .base import BaseModel


class Page(BaseModel):
    """
    Page aggregate. Sections live inline as a JSON document list and are
    only ever rewritten as a whole.
    """
    __tablename__ = "pages"

    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    title = db.Column(db.String(100), nullable=False)
    meta_title = db.Column(db.String(60), nullable=True)
    meta_description = db.Column(db.String(160), nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)
    sections = db.Column(db.JSON, nullable=False, default=list)
    seo = db.Column(db.JSON(none_as_null=True), default=dict)

    # Optimistic concurrency token, bumped by SQLAlchemy on every UPDATE
    revision = db.Column(db.Integer, nullable=False)

    __mapper_args__ = {"version_id_col": revision}

    def section_documents(self):
        return [dict(section) for section in self.sections or []]
