from fillstation.database.models.base import Base
from fillstation.database.models.station import StationOrm
from fillstation.database.models.staff import StaffOrm
from fillstation.database.models.tank import TankOrm
from fillstation.database.models.pump import PumpOrm, PumpSaleOrm
from fillstation.database.models.delivery import DeliveryOrm
