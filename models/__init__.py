from models.category import Category
from models.allocation import AllocationRequest, AllocationResult, CategoryResult
from models.advisory import AdvisoryReport
