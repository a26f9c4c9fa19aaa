from enum import Enum


class VehicleType(str, Enum):
    SEDAN = "sedan"
    SUV = "suv"
    VAN = "van"

    def __str__(self):
        return self.value
