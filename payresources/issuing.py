"""Value types for issued cards: merchants, authorizations, cards, disputes, transactions."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import StrEnum, auto
from typing import Any, Mapping


class MerchantCategory(StrEnum):
    """The industry a merchant belongs to.

    Each member's value is the lower-case snake_case name of the member.
    """

    AC_REFRIGERATION_REPAIR = auto()
    ACCOUNTING_BOOKKEEPING_SERVICES = auto()
    ADVERTISING_SERVICES = auto()
    AGRICULTURAL_COOPERATIVE = auto()
    AIRLINES_AIR_CARRIERS = auto()
    AIRPORTS_FLYING_FIELDS = auto()
    AMBULANCE_SERVICES = auto()
    AMUSEMENT_PARKS_CARNIVALS = auto()
    ANTIQUE_REPRODUCTIONS = auto()
    ANTIQUE_SHOPS = auto()
    AQUARIUMS = auto()
    ARCHITECTURAL_SURVEYING_SERVICES = auto()
    ART_DEALERS_AND_GALLERIES = auto()
    ARTISTS_SUPPLY_AND_CRAFT_SHOPS = auto()
    AUTO_AND_HOME_SUPPLY_STORES = auto()
    AUTO_BODY_REPAIR_SHOPS = auto()
    AUTO_PAINT_SHOPS = auto()
    AUTO_SERVICE_SHOPS = auto()
    AUTOMATED_CASH_DISBURSE = auto()
    AUTOMATED_FUEL_DISPENSERS = auto()
    AUTOMOBILE_ASSOCIATIONS = auto()
    AUTOMOTIVE_PARTS_AND_ACCESSORIES_STORES = auto()
    AUTOMOTIVE_TIRE_STORES = auto()
    BAIL_AND_BOND_PAYMENTS = auto()
    BAKERIES = auto()
    BANDS_ORCHESTRAS = auto()
    BARBER_AND_BEAUTY_SHOPS = auto()
    BETTING_CASINO_GAMBLING = auto()
    BICYCLE_SHOPS = auto()
    BILLIARD_POOL_ESTABLISHMENTS = auto()
    BOAT_DEALERS = auto()
    BOAT_RENTALS_AND_LEASES = auto()
    BOOK_STORES = auto()
    BOOKS_PERIODICALS_AND_NEWSPAPERS = auto()
    BOWLING_ALLEYS = auto()
    BUS_LINES = auto()
    BUSINESS_SECRETARIAL_SCHOOLS = auto()
    BUYING_SHOPPING_SERVICES = auto()
    CABLE_SATELLITE_AND_OTHER_PAY_TELEVISION_AND_RADIO = auto()
    CAMERA_AND_PHOTOGRAPHIC_SUPPLY_STORES = auto()
    CANDY_NUT_AND_CONFECTIONERY_STORES = auto()
    CAR_AND_TRUCK_DEALERS_NEW_USED = auto()
    CAR_AND_TRUCK_DEALERS_USED_ONLY = auto()
    CAR_RENTAL_AGENCIES = auto()
    CAR_WASHES = auto()
    CARPENTRY_SERVICES = auto()
    CARPET_UPHOLSTERY_CLEANING = auto()
    CATERERS = auto()
    CHARITABLE_AND_SOCIAL_SERVICE_ORGANIZATIONS_FUNDRAISING = auto()
    CHEMICALS_AND_ALLIED_PRODUCTS = auto()
    CHIDRENS_AND_INFANTS_WEAR_STORES = auto()
    CHILD_CARE_SERVICES = auto()
    CHIROPODISTS_PODIATRISTS = auto()
    CHIROPRACTORS = auto()
    CIGAR_STORES_AND_STANDS = auto()
    CIVIC_SOCIAL_FRATERNAL_ASSOCIATIONS = auto()
    CLEANING_AND_MAINTENANCE = auto()
    CLOTHING_RENTAL = auto()
    COLLEGES_UNIVERSITIES = auto()
    COMMERCIAL_EQUIPMENT = auto()
    COMMERCIAL_FOOTWEAR = auto()
    COMMERCIAL_PHOTOGRAPHY_ART_AND_GRAPHICS = auto()
    COMMUTER_TRANSPORT_AND_FERRIES = auto()
    COMPUTER_NETWORK_SERVICES = auto()
    COMPUTER_PROGRAMMING = auto()
    COMPUTER_REPAIR = auto()
    COMPUTER_SOFTWARE_STORES = auto()
    COMPUTERS_PERIPHERALS_AND_SOFTWARE = auto()
    CONCRETE_WORK_SERVICES = auto()
    CONSTRUCTION_MATERIALS = auto()
    CONSULTING_PUBLIC_RELATIONS = auto()
    CORRESPONDENCE_SCHOOLS = auto()
    COSMETIC_STORES = auto()
    COUNSELING_SERVICES = auto()
    COUNTRY_CLUBS = auto()
    COURIER_SERVICES = auto()
    COURT_COSTS = auto()
    CREDIT_REPORTING_AGENCIES = auto()
    CRUISE_LINES = auto()
    DAIRY_PRODUCTS_STORES = auto()
    DANCE_HALL_STUDIOS_SCHOOLS = auto()
    DATING_ESCORT_SERVICES = auto()
    DENTISTS_ORTHODONTISTS = auto()
    DEPARTMENT_STORES = auto()
    DETECTIVE_AGENCIES = auto()
    DIRECT_MARKETING_CATALOG_MERCHANT = auto()
    DIRECT_MARKETING_COMBINATION_CATALOG_AND_RETAIL_MERCHANT = auto()
    DIRECT_MARKETING_INBOUND_TELEMARKETING = auto()
    DIRECT_MARKETING_INSURANCE_SERVICES = auto()
    DIRECT_MARKETING_OTHER = auto()
    DIRECT_MARKETING_OUTBOUND_TELEMARKETING = auto()
    DIRECT_MARKETING_SUBSCRIPTION = auto()
    DIRECT_MARKETING_TRAVEL = auto()
    DISCOUNT_STORES = auto()
    DOCTORS = auto()
    DOOR_TO_DOOR_SALES = auto()
    DRAPERY_WINDOW_COVERING_AND_UPHOLSTERY_STORES = auto()
    DRINKING_PLACES = auto()
    DRUG_STORES_AND_PHARMACIES = auto()
    DRUGS_DRUG_PROPRIETARIES_AND_DRUGGIST_SUNDRIES = auto()
    DRY_CLEANERS = auto()
    DURABLE_GOODS = auto()
    DUTY_FREE_STORES = auto()
    EATING_PLACES_RESTAURANTS = auto()
    EDUCATIONAL_SERVICES = auto()
    ELECTRIC_RAZOR_STORES = auto()
    ELECTRICAL_PARTS_AND_EQUIPMENT = auto()
    ELECTRICAL_SERVICES = auto()
    ELECTRONICS_REPAIR_SHOPS = auto()
    ELECTRONICS_STORES = auto()
    ELEMENTARY_SECONDARY_SCHOOLS = auto()
    EMPLOYMENT_TEMP_AGENCIES = auto()
    EQUIPMENT_RENTAL = auto()
    EXTERMINATING_SERVICES = auto()
    FAMILY_CLOTHING_STORES = auto()
    FAST_FOOD_RESTAURANTS = auto()
    FINANCIAL_INSTITUTIONS = auto()
    FINES_GOVERNMENT_ADMINISTRATIVE_ENTITIES = auto()
    FIREPLACE_FIREPLACE_SCREENS_AND_ACCESSORIES_STORES = auto()
    FLOOR_COVERING_STORES = auto()
    FLORISTS = auto()
    FLORISTS_SUPPLIES_NURSERY_STOCK_AND_FLOWERS = auto()
    FREEZER_AND_LOCKER_MEAT_PROVISIONERS = auto()
    FUEL_DEALERS_NON_AUTOMOTIVE = auto()
    FUNERAL_SERVICES_CREMATORIES = auto()
    FURNITURE_HOME_FURNISHINGS_AND_EQUIPMENT_STORES_EXCEPT_APPLIANCES = auto()
    FURNITURE_REPAIR_REFINISHING = auto()
    FURRIERS_AND_FUR_SHOPS = auto()
    GENERAL_SERVICES = auto()
    GIFT_CARD_NOVELTY_AND_SOUVENIR_SHOPS = auto()
    GLASS_PAINT_AND_WALLPAPER_STORES = auto()
    GLASSWARE_CRYSTAL_STORES = auto()
    GOLF_COURSES_PUBLIC = auto()
    GOVERNMENT_SERVICES = auto()
    GROCERY_STORES_SUPERMARKETS = auto()
    HARDWARE_EQUIPMENT_AND_SUPPLIES = auto()
    HARDWARE_STORES = auto()
    HEALTH_AND_BEAUTY_SPAS = auto()
    HEARING_AIDS_SALES_AND_SUPPLIES = auto()
    HEATING_PLUMBING_A_C = auto()
    HOBBY_TOY_AND_GAME_SHOPS = auto()
    HOME_SUPPLY_WAREHOUSE_STORES = auto()
    HOSPITALS = auto()
    HOTELS_MOTELS_AND_RESORTS = auto()
    HOUSEHOLD_APPLIANCE_STORES = auto()
    INDUSTRIAL_SUPPLIES = auto()
    INFORMATION_RETRIEVAL_SERVICES = auto()
    INSURANCE_DEFAULT = auto()
    INSURANCE_UNDERWRITING_PREMIUMS = auto()
    INTRA_COMPANY_PURCHASES = auto()
    JEWELRY_STORES_WATCHES_CLOCKS_AND_SILVERWARE_STORES = auto()
    LANDSCAPING_SERVICES = auto()
    LAUNDRIES = auto()
    LAUNDRY_CLEANING_SERVICES = auto()
    LEGAL_SERVICES_ATTORNEYS = auto()
    LUGGAGE_AND_LEATHER_GOODS_STORES = auto()
    LUMBER_BUILDING_MATERIALS_STORES = auto()
    MANUAL_CASH_DISBURSE = auto()
    MARINAS_SERVICE_AND_SUPPLIES = auto()
    MASONRY_STONEWORK_AND_PLASTER = auto()
    MASSAGE_PARLORS = auto()
    MEDICAL_AND_DENTAL_LABS = auto()
    MEDICAL_DENTAL_OPHTHALMIC_AND_HOSPITAL_EQUIPMENT_AND_SUPPLIES = auto()
    MEDICAL_SERVICES = auto()
    MEMBERSHIP_ORGANIZATIONS = auto()
    MENS_AND_BOYS_CLOTHING_AND_ACCESSORIES_STORES = auto()
    MENS_WOMENS_CLOTHING_STORES = auto()
    METAL_SERVICE_CENTERS = auto()
    MISCELLANEOUS = auto()
    MISCELLANEOUS_APPAREL_AND_ACCESSORY_SHOPS = auto()
    MISCELLANEOUS_AUTO_DEALERS = auto()
    MISCELLANEOUS_BUSINESS_SERVICES = auto()
    MISCELLANEOUS_FOOD_STORES = auto()
    MISCELLANEOUS_GENERAL_MERCHANDISE = auto()
    MISCELLANEOUS_GENERAL_SERVICES = auto()
    MISCELLANEOUS_HOME_FURNISHING_SPECIALTY_STORES = auto()
    MISCELLANEOUS_PUBLISHING_AND_PRINTING = auto()
    MISCELLANEOUS_RECREATION_SERVICES = auto()
    MISCELLANEOUS_REPAIR_SHOPS = auto()
    MISCELLANEOUS_SPECIALTY_RETAIL = auto()
    MOBILE_HOME_DEALERS = auto()
    MOTION_PICTURE_THEATERS = auto()
    MOTOR_FREIGHT_CARRIERS_AND_TRUCKING = auto()
    MOTOR_HOMES_DEALERS = auto()
    MOTOR_VEHICLE_SUPPLIES_AND_NEW_PARTS = auto()
    MOTORCYCLE_SHOPS_AND_DEALERS = auto()
    MOTORCYCLE_SHOPS_DEALERS = auto()
    MUSIC_STORES_MUSICAL_INSTRUMENTS_PIANOS_AND_SHEET_MUSIC = auto()
    NEWS_DEALERS_AND_NEWSSTANDS = auto()
    NON_FI_MONEY_ORDERS = auto()
    NON_FI_STORED_VALUE_CARD_PURCHASE_LOAD = auto()
    NONDURABLE_GOODS = auto()
    NURSERIES_LAWN_AND_GARDEN_SUPPLY_STORES = auto()
    NURSING_PERSONAL_CARE = auto()
    OFFICE_AND_COMMERCIAL_FURNITURE = auto()
    OPTICIANS_EYEGLASSES = auto()
    OPTOMETRISTS_OPHTHALMOLOGIST = auto()
    ORTHOPEDIC_GOODS_PROSTHETIC_DEVICES = auto()
    OSTEOPATHS = auto()
    PACKAGE_STORES_BEER_WINE_AND_LIQUOR = auto()
    PAINTS_VARNISHES_AND_SUPPLIES = auto()
    PARKING_LOTS_GARAGES = auto()
    PASSENGER_RAILWAYS = auto()
    PAWN_SHOPS = auto()
    PET_SHOPS_PET_FOOD_AND_SUPPLIES = auto()
    PETROLEUM_AND_PETROLEUM_PRODUCTS = auto()
    PHOTO_DEVELOPING = auto()
    PHOTOGRAPHIC_PHOTOCOPY_MICROFILM_EQUIPMENT_AND_SUPPLIES = auto()
    PHOTOGRAPHIC_STUDIOS = auto()
    PICTURE_VIDEO_PRODUCTION = auto()
    PIECE_GOODS_NOTIONS_AND_OTHER_DRY_GOODS = auto()
    PLUMBING_HEATING_EQUIPMENT_AND_SUPPLIES = auto()
    POLITICAL_ORGANIZATIONS = auto()
    POSTAL_SERVICES_GOVERNMENT_ONLY = auto()
    PRECIOUS_STONES_AND_METALS_WATCHES_AND_JEWELRY = auto()
    PROFESSIONAL_SERVICES = auto()
    PUBLIC_WAREHOUSING_AND_STORAGE = auto()
    QUICK_COPY_REPRO_AND_BLUEPRINT = auto()
    RAILROADS = auto()
    REAL_ESTATE_AGENTS_AND_MANAGERS_RENTALS = auto()
    RECORD_STORES = auto()
    RECREATIONAL_VEHICLE_RENTALS = auto()
    RELIGIOUS_GOODS_STORES = auto()
    RELIGIOUS_ORGANIZATIONS = auto()
    ROOFING_SIDING_SHEET_METAL = auto()
    SECRETARIAL_SUPPORT_SERVICES = auto()
    SECURITY_BROKERS_DEALERS = auto()
    SERVICE_STATIONS = auto()
    SEWING_NEEDLEWORK_FABRIC_AND_PIECE_GOODS_STORES = auto()
    SHOE_REPAIR_HAT_CLEANING = auto()
    SHOE_STORES = auto()
    SMALL_APPLIANCE_REPAIR = auto()
    SNOWMOBILE_DEALERS = auto()
    SPECIAL_TRADE_SERVICES = auto()
    SPECIALTY_CLEANING = auto()
    SPORTING_GOODS_STORES = auto()
    SPORTING_RECREATION_CAMPS = auto()
    SPORTS_AND_RIDING_APPAREL_STORES = auto()
    SPORTS_CLUBS_FIELDS = auto()
    STAMP_AND_COIN_STORES = auto()
    STATIONARY_OFFICE_SUPPLIES_PRINTING_AND_WRITING_PAPER = auto()
    STATIONERY_STORES_OFFICE_AND_SCHOOL_SUPPLY_STORES = auto()
    SWIMMING_POOLS_SALES = auto()
    T_UI_TRAVEL_GERMANY = auto()
    TAILORS_ALTERATIONS = auto()
    TAX_PAYMENTS_GOVERNMENT_AGENCIES = auto()
    TAX_PREPARATION_SERVICES = auto()
    TAXICABS_LIMOUSINES = auto()
    TELECOMMUNICATION_EQUIPMENT_AND_TELEPHONE_SALES = auto()
    TELECOMMUNICATION_SERVICES = auto()
    TELEGRAPH_SERVICES = auto()
    TENT_AND_AWNING_SHOPS = auto()
    TESTING_LABORATORIES = auto()
    THEATRICAL_TICKET_AGENCIES = auto()
    TIMESHARES = auto()
    TIRE_RETREADING_AND_REPAIR = auto()
    TOLLS_BRIDGE_FEES = auto()
    TOURIST_ATTRACTIONS_AND_EXHIBITS = auto()
    TOWING_SERVICES = auto()
    TRAILER_PARKS_CAMPGROUNDS = auto()
    TRANSPORTATION_SERVICES = auto()
    TRAVEL_AGENCIES_TOUR_OPERATORS = auto()
    TRUCK_STOP_ITERATION = auto()
    TRUCK_UTILITY_TRAILER_RENTALS = auto()
    TYPESETTING_PLATE_MAKING_AND_RELATED_SERVICES = auto()
    TYPEWRITER_STORES = auto()
    U_S_FEDERAL_GOVERNMENT_AGENCIES_OR_DEPARTMENTS = auto()
    UNIFORMS_COMMERCIAL_CLOTHING = auto()
    USED_MERCHANDISE_AND_SECONDHAND_STORES = auto()
    UTILITIES = auto()
    VARIETY_STORES = auto()
    VETERINARY_SERVICES = auto()
    VIDEO_AMUSEMENT_GAME_SUPPLIES = auto()
    VIDEO_GAME_ARCADES = auto()
    VIDEO_TAPE_RENTAL_STORES = auto()
    VOCATIONAL_TRADE_SCHOOLS = auto()
    WATCH_JEWELRY_REPAIR = auto()
    WELDING_REPAIR = auto()
    WHOLESALE_CLUBS = auto()
    WIG_AND_TOUPEE_STORES = auto()
    WIRES_MONEY_ORDERS = auto()
    WOMENS_ACCESSORY_AND_SPECIALTY_SHOPS = auto()
    WOMENS_READY_TO_WEAR_STORES = auto()
    WRECKING_AND_SALVAGE_YARDS = auto()

    @classmethod
    def default(cls) -> MerchantCategory:
        """The category used when none is given."""
        return cls.MISCELLANEOUS


@dataclass
class MerchantData:
    """The merchant an issuing authorization was made with."""

    network_id: str = ""
    category: MerchantCategory = MerchantCategory.MISCELLANEOUS
    name: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None

    def __post_init__(self) -> None:
        self.category = MerchantCategory(self.category)

    def to_dict(self) -> dict[str, str]:
        """The merchant as a JSON-ready mapping; unset optional fields are left out."""
        result: dict[str, str] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                result[f.name] = str(value)
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MerchantData:
        """Build merchant data from a decoded JSON mapping.

        ``network_id`` and ``category`` are required; an unknown category
        raises ValueError.
        """
        missing = [key for key in ("network_id", "category") if key not in data]
        if missing:
            raise ValueError(f"missing field(s): {', '.join(missing)}")
        known = {f.name for f in fields(cls)}
        kwargs = {key: value for key, value in data.items() if key in known}
        kwargs["category"] = MerchantCategory(data["category"])
        return cls(**kwargs)


class IssuingAuthorizationCheck(StrEnum):
    """The result of checking a piece of verification data."""

    MATCH = "match"
    MISMATCH = "mismatch"
    NOT_PROVIDED = "not_provided"

    @classmethod
    def default(cls) -> IssuingAuthorizationCheck:
        """The check result used when none is given."""
        return cls.NOT_PROVIDED


class IssuingAuthorizationMethod(StrEnum):
    """How the card details were provided for an authorization."""

    KEYED_IN = "keyed_in"
    SWIPE = "swipe"
    CHIP = "chip"
    CONTACTLESS = "contactless"
    ONLINE = "online"

    @classmethod
    def default(cls) -> IssuingAuthorizationMethod:
        """The method used when none is given."""
        return cls.ONLINE


class IssuingAuthorizationReason(StrEnum):
    """Why an authorization request was approved or declined."""

    AUTHENTICATION_FAILED = "authentication_failed"
    AUTHORIZATION_CONTROLS = "authorization_controls"
    CARD_ACTIVE = "card_active"
    CARD_INACTIVE = "card_inactive"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    ACCOUNT_COMPLIANCE_DISABLED = "account_compliance_disabled"
    ACCOUNT_INACTIVE = "account_inactive"
    SUSPECTED_FRAUD = "suspected_fraud"
    WEBHOOK_APPROVED = "webhook_approved"
    WEBHOOK_DECLINED = "webhook_declined"
    WEBHOOK_TIMEOUT = "webhook_timeout"

    @classmethod
    def default(cls) -> IssuingAuthorizationReason:
        """The reason used when none is given."""
        return cls.AUTHENTICATION_FAILED


class IssuingAuthorizationWalletProvider(StrEnum):
    """The digital wallet an authorization came through."""

    APPLE_PAY = "apple_pay"
    GOOGLE_PAY = "google_pay"
    SAMSUNG_PAY = "samsung_pay"

    @classmethod
    def default(cls) -> IssuingAuthorizationWalletProvider:
        """The wallet provider used when none is given."""
        return cls.APPLE_PAY


class IssuingCardPinStatus(StrEnum):
    """The possible values of a card PIN's ``status`` field."""

    ACTIVE = "active"
    BLOCKED = "blocked"


class IssuingCardShippingStatus(StrEnum):
    """The possible values of a card shipment's ``status`` field."""

    CANCELED = "canceled"
    DELIVERED = "delivered"
    FAILURE = "failure"
    PENDING = "pending"
    RETURNED = "returned"
    SHIPPED = "shipped"


class IssuingCardShippingType(StrEnum):
    """Whether a card ships alone or with others."""

    BULK = "bulk"
    INDIVIDUAL = "individual"

    @classmethod
    def default(cls) -> IssuingCardShippingType:
        """The shipping type used when none is given."""
        return cls.INDIVIDUAL


class IssuingCardType(StrEnum):
    """Whether an issued card is physical or virtual."""

    PHYSICAL = "physical"
    VIRTUAL = "virtual"

    @classmethod
    def default(cls) -> IssuingCardType:
        """The card type used when none is given."""
        return cls.PHYSICAL


class IssuingDisputeReason(StrEnum):
    """The possible values of an issuing dispute's ``reason`` field."""

    FRAUDULENT = "fraudulent"
    OTHER = "other"


class IssuingDisputeStatus(StrEnum):
    """The possible values of an issuing dispute's ``status`` field."""

    LOST = "lost"
    UNDER_REVIEW = "under_review"
    UNSUBMITTED = "unsubmitted"
    WON = "won"

    @classmethod
    def default(cls) -> IssuingDisputeStatus:
        """The status used when none is given."""
        return cls.UNSUBMITTED


class IssuingTransactionType(StrEnum):
    """The possible values of an issuing transaction's ``type`` field."""

    CAPTURE = "capture"
    CASH_WITHDRAWAL = "cash_withdrawal"
    DISPUTE = "dispute"
    DISPUTE_LOSS = "dispute_loss"
    REFUND = "refund"
    REFUND_REVERSAL = "refund_reversal"

    @classmethod
    def default(cls) -> IssuingTransactionType:
        """The type used when none is given."""
        return cls.CAPTURE