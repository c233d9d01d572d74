"""Supported currencies, identified by lower-case ISO 4217 codes."""

from __future__ import annotations

from enum import StrEnum, auto


class ParseCurrencyError(ValueError):
    """Raised when a string is not a known currency code."""

    def __init__(self, message: str = "unknown currency code") -> None:
        super().__init__(message)


class Currency(StrEnum):
    """A currency the payment API accepts.

    Each member's value is its lower-case three-letter code, which is also
    what ``str()`` returns and what goes over the wire.
    """

    AED = auto()  # United Arab Emirates Dirham
    AFN = auto()  # Afghan Afghani
    ALL = auto()  # Albanian Lek
    AMD = auto()  # Armenian Dram
    ANG = auto()  # Netherlands Antillean Gulden
    AOA = auto()  # Angolan Kwanza
    ARS = auto()  # Argentine Peso
    AUD = auto()  # Australian Dollar
    AWG = auto()  # Aruban Florin
    AZN = auto()  # Azerbaijani Manat
    BAM = auto()  # Bosnia & Herzegovina Convertible Mark
    BBD = auto()  # Barbadian Dollar
    BDT = auto()  # Bangladeshi Taka
    BGN = auto()  # Bulgarian Lev
    BIF = auto()  # Burundian Franc
    BMD = auto()  # Bermudian Dollar
    BND = auto()  # Brunei Dollar
    BOB = auto()  # Bolivian Boliviano
    BRL = auto()  # Brazilian Real
    BSD = auto()  # Bahamian Dollar
    BWP = auto()  # Botswana Pula
    BZD = auto()  # Belize Dollar
    CAD = auto()  # Canadian Dollar
    CDF = auto()  # Congolese Franc
    CHF = auto()  # Swiss Franc
    CLP = auto()  # Chilean Peso
    CNY = auto()  # Chinese Renminbi Yuan
    COP = auto()  # Colombian Peso
    CRC = auto()  # Costa Rican Colón
    CVE = auto()  # Cape Verdean Escudo
    CZK = auto()  # Czech Koruna
    DJF = auto()  # Djiboutian Franc
    DKK = auto()  # Danish Krone
    DOP = auto()  # Dominican Peso
    DZD = auto()  # Algerian Dinar
    EEK = auto()  # Estonian Kroon
    EGP = auto()  # Egyptian Pound
    ETB = auto()  # Ethiopian Birr
    EUR = auto()  # Euro
    FJD = auto()  # Fijian Dollar
    FKP = auto()  # Falkland Islands Pound
    GBP = auto()  # British Pound
    GEL = auto()  # Georgian Lari
    GIP = auto()  # Gibraltar Pound
    GMD = auto()  # Gambian Dalasi
    GNF = auto()  # Guinean Franc
    GTQ = auto()  # Guatemalan Quetzal
    GYD = auto()  # Guyanese Dollar
    HKD = auto()  # Hong Kong Dollar
    HNL = auto()  # Honduran Lempira
    HRK = auto()  # Croatian Kuna
    HTG = auto()  # Haitian Gourde
    HUF = auto()  # Hungarian Forint
    IDR = auto()  # Indonesian Rupiah
    ILS = auto()  # Israeli New Sheqel
    INR = auto()  # Indian Rupee
    ISK = auto()  # Icelandic Króna
    JMD = auto()  # Jamaican Dollar
    JPY = auto()  # Japanese Yen
    KES = auto()  # Kenyan Shilling
    KGS = auto()  # Kyrgyzstani Som
    KHR = auto()  # Cambodian Riel
    KMF = auto()  # Comorian Franc
    KRW = auto()  # South Korean Won
    KYD = auto()  # Cayman Islands Dollar
    KZT = auto()  # Kazakhstani Tenge
    LAK = auto()  # Lao Kip
    LBP = auto()  # Lebanese Pound
    LKR = auto()  # Sri Lankan Rupee
    LRD = auto()  # Liberian Dollar
    LSL = auto()  # Lesotho Loti
    LTL = auto()  # Lithuanian Litas
    LVL = auto()  # Latvian Lats
    MAD = auto()  # Moroccan Dirham
    MDL = auto()  # Moldovan Leu
    MGA = auto()  # Malagasy Ariary
    MKD = auto()  # Macedonian Denar
    MNT = auto()  # Mongolian Tögrög
    MOP = auto()  # Macanese Pataca
    MRO = auto()  # Mauritanian Ouguiya
    MUR = auto()  # Mauritian Rupee
    MVR = auto()  # Maldivian Rufiyaa
    MWK = auto()  # Malawian Kwacha
    MXN = auto()  # Mexican Peso
    MYR = auto()  # Malaysian Ringgit
    MZN = auto()  # Mozambican Metical
    NAD = auto()  # Namibian Dollar
    NGN = auto()  # Nigerian Naira
    NIO = auto()  # Nicaraguan Córdoba
    NOK = auto()  # Norwegian Krone
    NPR = auto()  # Nepalese Rupee
    NZD = auto()  # New Zealand Dollar
    PAB = auto()  # Panamanian Balboa
    PEN = auto()  # Peruvian Nuevo Sol
    PGK = auto()  # Papua New Guinean Kina
    PHP = auto()  # Philippine Peso
    PKR = auto()  # Pakistani Rupee
    PLN = auto()  # Polish Złoty
    PYG = auto()  # Paraguayan Guaraní
    QAR = auto()  # Qatari Riyal
    RON = auto()  # Romanian Leu
    RSD = auto()  # Serbian Dinar
    RUB = auto()  # Russian Ruble
    RWF = auto()  # Rwandan Franc
    SAR = auto()  # Saudi Riyal
    SBD = auto()  # Solomon Islands Dollar
    SCR = auto()  # Seychellois Rupee
    SEK = auto()  # Swedish Krona
    SGD = auto()  # Singapore Dollar
    SHP = auto()  # Saint Helenian Pound
    SLL = auto()  # Sierra Leonean Leone
    SOS = auto()  # Somali Shilling
    SRD = auto()  # Surinamese Dollar
    STD = auto()  # São Tomé and Príncipe Dobra
    SVC = auto()  # Salvadoran Colón
    SZL = auto()  # Swazi Lilangeni
    THB = auto()  # Thai Baht
    TJS = auto()  # Tajikistani Somoni
    TOP = auto()  # Tongan Paʻanga
    TRY = auto()  # Turkish Lira
    TTD = auto()  # Trinidad and Tobago Dollar
    TWD = auto()  # New Taiwan Dollar
    TZS = auto()  # Tanzanian Shilling
    UAH = auto()  # Ukrainian Hryvnia
    UGX = auto()  # Ugandan Shilling
    USD = auto()  # United States Dollar
    UYU = auto()  # Uruguayan Peso
    UZS = auto()  # Uzbekistani Som
    VEF = auto()  # Venezuelan Bolívar
    VND = auto()  # Vietnamese Đồng
    VUV = auto()  # Vanuatu Vatu
    WST = auto()  # Samoan Tala
    XAF = auto()  # Central African Cfa Franc
    XCD = auto()  # East Caribbean Dollar
    XOF = auto()  # West African Cfa Franc
    XPF = auto()  # Cfp Franc
    YER = auto()  # Yemeni Rial
    ZAR = auto()  # South African Rand
    ZMW = auto()  # Zambian Kwacha

    @classmethod
    def parse(cls, code: str) -> Currency:
        """Return the currency for an exact lower-case code.

        Raises ParseCurrencyError for anything else.
        """
        try:
            return cls(code)
        except ValueError:
            raise ParseCurrencyError() from None

    @classmethod
    def default(cls) -> Currency:
        """The currency used when none is given."""
        return cls.USD