# /app/db/base.py

# Central registry for all SQLAlchemy models. Importing them here guarantees
# Base.metadata knows every table before bootstrap_schema() runs.

from .base_class import Base

from .models.generation_models import Generation
from .models.saved_result_models import SavedResult
from .models.training_models import TrainingExample
