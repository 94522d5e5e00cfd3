import logging

from record_decorator import RecordDecorator, after_save, before_validation, validator
from showcase.models import Balloon, BalloonSize

logger = logging.getLogger(__name__)


class BalloonDecorator(RecordDecorator, decorates=Balloon):
    """
    Shop front view of a Balloon: accepts loosely typed colour input and only the sizes the shop sells
    """

    @property
    def label(self) -> str:
        return f"{self.size} {self.color} balloon"

    @before_validation
    def normalise_color(self):
        if isinstance(self.color, str):
            self.color = self.color.strip().lower()

    @validator
    def size_must_be_sold(self):
        if self.size not in BalloonSize.values:
            self.errors.add('size', 'is not included in the list')

    @after_save
    def log_saved(self):
        logger.info(f"Saved {self.label} ({self.decorated_record})")
