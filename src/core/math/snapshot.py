"""
BigIntSnapshot — Immutable снимок состояния BigInt

Pydantic модель пары (limbs, sign). Используется как валидирующая граница
при построении BigInt из внешнего массива limbs и для получения
неизменяемой копии состояния (BigInt сам по себе изменяемый).
"""

from pydantic import BaseModel, Field, field_validator

from src.core.math.limbs import MAX_LIMB, trim_limbs


# =============================================================================
# SNAPSHOT MODEL
# =============================================================================


class BigIntSnapshot(BaseModel):
    """
    Снимок значения BigInt.

    Immutable модель (frozen=True). limbs хранятся младшим limb первым
    и нормализуются: старшие нулевые limbs удаляются, ноль всегда [0].
    """

    limbs: tuple[int, ...] = Field(
        default=(0,), description="Limbs в порядке от младшего к старшему"
    )
    sign: bool = Field(default=False, description="True для отрицательного значения")

    model_config = {"frozen": True, "strict": True}

    @field_validator("limbs")
    @classmethod
    def validate_limbs(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """
        Проверка диапазона каждого limb и нормализация.

        Каждый limb должен быть в [0, MAX_LIMB].
        """
        for index, limb in enumerate(v):
            if limb < 0 or limb > MAX_LIMB:
                raise ValueError(f"limbs[{index}] = {limb} outside [0, {MAX_LIMB}]")
        return tuple(trim_limbs(list(v)))

    @property
    def is_zero(self) -> bool:
        """True если снимок представляет ноль (независимо от знака)."""
        return self.limbs == (0,)
