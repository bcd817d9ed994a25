from . import db


class Article(db.Model):
    __tablename__ = "articles"
    id = db.Column(db.Integer, primary_key=True)
    category = db.Column(db.Text, index=True, nullable=False)
    created = db.Column(db.DateTime(timezone=True), nullable=False)
    title = db.Column(db.Text, nullable=False)
    body = db.Column(db.Text, nullable=False)
    slug = db.Column(db.String(255), unique=True, index=True, nullable=False)

    def __repr__(self):
        return f"<Article {self.slug!r} [{self.category}]>"
