from enum import Enum


class WearableCategory(str, Enum):
    EYEBROWS = "eyebrows"
    EYES = "eyes"
    FACIAL_HAIR = "facial_hair"
    HAIR = "hair"
    MOUTH = "mouth"
    UPPER_BODY = "upper_body"
    LOWER_BODY = "lower_body"
    FEET = "feet"
    EARRING = "earring"
    EYEWEAR = "eyewear"
    HAT = "hat"
    HELMET = "helmet"
    MASK = "mask"
    TIARA = "tiara"
    TOP_HEAD = "top_head"


class WearableRarity(str, Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"
    MYTHIC = "mythic"
    UNIQUE = "unique"


class BodyShape(str, Enum):
    BASE_MALE = "BaseMale"
    BASE_FEMALE = "BaseFemale"
