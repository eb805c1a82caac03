# src/arena/config/models.py

from typing import Annotated, List, Literal, Union
from pydantic import BaseModel, Field

class GamerSpec(BaseModel):
    name: str = "Player"
    health: int = 100                # starting health

class EnemySpec(BaseModel):
    kind: Literal["enemy"] = "enemy"
    name: str
    damage: int = Field(ge=0)        # fixed for the enemy's lifetime

class CameraSpec(BaseModel):
    kind: Literal["camera"] = "camera"

ObserverSpec = Annotated[Union[EnemySpec, CameraSpec], Field(discriminator="kind")]

class ScenarioConfig(BaseModel):
    gamer: GamerSpec = GamerSpec()
    observers: List[ObserverSpec] = Field(default_factory=list)  # registration order

    # Helper method
    def enemies(self) -> List[EnemySpec]:
        """
        Returns only the enemy entries, in registration order.
        Useful for computing the expected damage of a broadcast.
        """
        return [o for o in self.observers if isinstance(o, EnemySpec)]
