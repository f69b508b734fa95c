from app.domain.data_model import DataModel
from app.repositories.base import BaseRepository


class DataModelRepository(BaseRepository[DataModel]):
    model = DataModel
