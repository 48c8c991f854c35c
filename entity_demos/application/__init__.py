"""
Application Layer

The five demo programs, each driving one or two keyed entity stores.
"""

from entity_demos.application.finance import FinanceApp
from entity_demos.application.healthcare import HealthSystemApp
from entity_demos.application.warehouse import WarehouseManager
from entity_demos.application.inventory import InventoryApp
from entity_demos.application.grading import StudentResultProcessor
