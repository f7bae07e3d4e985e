"""ISO-4217 currency table."""

from dataclasses import dataclass
from enum import Enum, unique


@dataclass(frozen=True)
class CurrencyInfo:
    """Static description of a currency.

    Attributes:
        code: ISO-4217 alphabetic code.
        symbol: Display symbol.
        digits: Number of minor-unit digits.
        display_name: English currency name.
    """

    code: str
    symbol: str
    digits: int
    display_name: str


@unique
class Currency(Enum):
    """Active ISO-4217 currencies and precious metals.

    The testing code ``XTS`` and the no-currency code ``XXX`` are left out,
    so positions priced in them fail to resolve.
    """

    AED = CurrencyInfo("AED", "د.إ", 2, "UAE Dirham")
    AFN = CurrencyInfo("AFN", "؋", 2, "Afghani")
    ALL = CurrencyInfo("ALL", "L", 2, "Lek")
    AMD = CurrencyInfo("AMD", "֏", 2, "Armenian Dram")
    ANG = CurrencyInfo("ANG", "ƒ", 2, "Netherlands Antillean Guilder")
    AOA = CurrencyInfo("AOA", "Kz", 2, "Kwanza")
    ARS = CurrencyInfo("ARS", "AR$", 2, "Argentine Peso")
    AUD = CurrencyInfo("AUD", "A$", 2, "Australian Dollar")
    AWG = CurrencyInfo("AWG", "Afl", 2, "Aruban Florin")
    AZN = CurrencyInfo("AZN", "₼", 2, "Azerbaijan Manat")
    BAM = CurrencyInfo("BAM", "KM", 2, "Convertible Mark")
    BBD = CurrencyInfo("BBD", "Bds$", 2, "Barbados Dollar")
    BDT = CurrencyInfo("BDT", "৳", 2, "Taka")
    BGN = CurrencyInfo("BGN", "лв", 2, "Bulgarian Lev")
    BHD = CurrencyInfo("BHD", "BD", 3, "Bahraini Dinar")
    BIF = CurrencyInfo("BIF", "FBu", 0, "Burundi Franc")
    BMD = CurrencyInfo("BMD", "BD$", 2, "Bermudian Dollar")
    BND = CurrencyInfo("BND", "B$", 2, "Brunei Dollar")
    BOB = CurrencyInfo("BOB", "Bs", 2, "Boliviano")
    BOV = CurrencyInfo("BOV", "BOV", 2, "Mvdol")
    BRL = CurrencyInfo("BRL", "R$", 2, "Brazilian Real")
    BSD = CurrencyInfo("BSD", "B$", 2, "Bahamian Dollar")
    BTN = CurrencyInfo("BTN", "Nu.", 2, "Ngultrum")
    BWP = CurrencyInfo("BWP", "P", 2, "Pula")
    BYN = CurrencyInfo("BYN", "Br", 2, "Belarusian Ruble")
    BZD = CurrencyInfo("BZD", "BZ$", 2, "Belize Dollar")
    CAD = CurrencyInfo("CAD", "C$", 2, "Canadian Dollar")
    CDF = CurrencyInfo("CDF", "FC", 2, "Congolese Franc")
    CHE = CurrencyInfo("CHE", "CHE", 2, "WIR Euro")
    CHF = CurrencyInfo("CHF", "CHF", 2, "Swiss Franc")
    CHW = CurrencyInfo("CHW", "CHW", 2, "WIR Franc")
    CLF = CurrencyInfo("CLF", "UF", 4, "Unidad de Fomento")
    CLP = CurrencyInfo("CLP", "CLP$", 0, "Chilean Peso")
    CNY = CurrencyInfo("CNY", "¥", 2, "Yuan Renminbi")
    COP = CurrencyInfo("COP", "COL$", 2, "Colombian Peso")
    COU = CurrencyInfo("COU", "COU", 2, "Unidad de Valor Real")
    CRC = CurrencyInfo("CRC", "₡", 2, "Costa Rican Colon")
    CUC = CurrencyInfo("CUC", "CUC$", 2, "Peso Convertible")
    CUP = CurrencyInfo("CUP", "₱", 2, "Cuban Peso")
    CVE = CurrencyInfo("CVE", "Esc", 2, "Cabo Verde Escudo")
    CZK = CurrencyInfo("CZK", "Kč", 2, "Czech Koruna")
    DJF = CurrencyInfo("DJF", "Fdj", 0, "Djibouti Franc")
    DKK = CurrencyInfo("DKK", "kr", 2, "Danish Krone")
    DOP = CurrencyInfo("DOP", "RD$", 2, "Dominican Peso")
    DZD = CurrencyInfo("DZD", "DA", 2, "Algerian Dinar")
    EGP = CurrencyInfo("EGP", "E£", 2, "Egyptian Pound")
    ERN = CurrencyInfo("ERN", "Nfk", 2, "Nakfa")
    ETB = CurrencyInfo("ETB", "Br", 2, "Ethiopian Birr")
    EUR = CurrencyInfo("EUR", "€", 2, "Euro")
    FJD = CurrencyInfo("FJD", "FJ$", 2, "Fiji Dollar")
    FKP = CurrencyInfo("FKP", "FK£", 2, "Falkland Islands Pound")
    GBP = CurrencyInfo("GBP", "£", 2, "Pound Sterling")
    GEL = CurrencyInfo("GEL", "₾", 2, "Lari")
    GHS = CurrencyInfo("GHS", "₵", 2, "Ghana Cedi")
    GIP = CurrencyInfo("GIP", "£", 2, "Gibraltar Pound")
    GMD = CurrencyInfo("GMD", "D", 2, "Dalasi")
    GNF = CurrencyInfo("GNF", "FG", 0, "Guinean Franc")
    GTQ = CurrencyInfo("GTQ", "Q", 2, "Quetzal")
    GYD = CurrencyInfo("GYD", "G$", 2, "Guyana Dollar")
    HKD = CurrencyInfo("HKD", "HK$", 2, "Hong Kong Dollar")
    HNL = CurrencyInfo("HNL", "L", 2, "Lempira")
    HTG = CurrencyInfo("HTG", "G", 2, "Gourde")
    HUF = CurrencyInfo("HUF", "Ft", 2, "Forint")
    IDR = CurrencyInfo("IDR", "Rp", 2, "Rupiah")
    ILS = CurrencyInfo("ILS", "₪", 2, "New Israeli Sheqel")
    INR = CurrencyInfo("INR", "₹", 2, "Indian Rupee")
    IQD = CurrencyInfo("IQD", "ID", 3, "Iraqi Dinar")
    IRR = CurrencyInfo("IRR", "﷼", 2, "Iranian Rial")
    ISK = CurrencyInfo("ISK", "kr", 0, "Iceland Krona")
    JMD = CurrencyInfo("JMD", "J$", 2, "Jamaican Dollar")
    JOD = CurrencyInfo("JOD", "JD", 3, "Jordanian Dinar")
    JPY = CurrencyInfo("JPY", "¥", 0, "Yen")
    KES = CurrencyInfo("KES", "KSh", 2, "Kenyan Shilling")
    KGS = CurrencyInfo("KGS", "с", 2, "Som")
    KHR = CurrencyInfo("KHR", "៛", 2, "Riel")
    KMF = CurrencyInfo("KMF", "CF", 0, "Comorian Franc")
    KPW = CurrencyInfo("KPW", "₩", 2, "North Korean Won")
    KRW = CurrencyInfo("KRW", "₩", 0, "Won")
    KWD = CurrencyInfo("KWD", "KD", 3, "Kuwaiti Dinar")
    KYD = CurrencyInfo("KYD", "CI$", 2, "Cayman Islands Dollar")
    KZT = CurrencyInfo("KZT", "₸", 2, "Tenge")
    LAK = CurrencyInfo("LAK", "₭", 2, "Lao Kip")
    LBP = CurrencyInfo("LBP", "LL", 2, "Lebanese Pound")
    LKR = CurrencyInfo("LKR", "Rs", 2, "Sri Lanka Rupee")
    LRD = CurrencyInfo("LRD", "L$", 2, "Liberian Dollar")
    LSL = CurrencyInfo("LSL", "L", 2, "Loti")
    LYD = CurrencyInfo("LYD", "LD", 3, "Libyan Dinar")
    MAD = CurrencyInfo("MAD", "DH", 2, "Moroccan Dirham")
    MDL = CurrencyInfo("MDL", "L", 2, "Moldovan Leu")
    MGA = CurrencyInfo("MGA", "Ar", 2, "Malagasy Ariary")
    MKD = CurrencyInfo("MKD", "ден", 2, "Denar")
    MMK = CurrencyInfo("MMK", "K", 2, "Kyat")
    MNT = CurrencyInfo("MNT", "₮", 2, "Tugrik")
    MOP = CurrencyInfo("MOP", "MOP$", 2, "Pataca")
    MRU = CurrencyInfo("MRU", "UM", 2, "Ouguiya")
    MUR = CurrencyInfo("MUR", "Rs", 2, "Mauritius Rupee")
    MVR = CurrencyInfo("MVR", "Rf", 2, "Rufiyaa")
    MWK = CurrencyInfo("MWK", "MK", 2, "Malawi Kwacha")
    MXN = CurrencyInfo("MXN", "Mex$", 2, "Mexican Peso")
    MXV = CurrencyInfo("MXV", "MXV", 2, "Mexican Unidad de Inversion")
    MYR = CurrencyInfo("MYR", "RM", 2, "Malaysian Ringgit")
    MZN = CurrencyInfo("MZN", "MT", 2, "Mozambique Metical")
    NAD = CurrencyInfo("NAD", "N$", 2, "Namibia Dollar")
    NGN = CurrencyInfo("NGN", "₦", 2, "Naira")
    NIO = CurrencyInfo("NIO", "C$", 2, "Cordoba Oro")
    NOK = CurrencyInfo("NOK", "kr", 2, "Norwegian Krone")
    NPR = CurrencyInfo("NPR", "Rs", 2, "Nepalese Rupee")
    NZD = CurrencyInfo("NZD", "NZ$", 2, "New Zealand Dollar")
    OMR = CurrencyInfo("OMR", "RO", 3, "Rial Omani")
    PAB = CurrencyInfo("PAB", "B/.", 2, "Balboa")
    PEN = CurrencyInfo("PEN", "S/", 2, "Sol")
    PGK = CurrencyInfo("PGK", "K", 2, "Kina")
    PHP = CurrencyInfo("PHP", "₱", 2, "Philippine Peso")
    PKR = CurrencyInfo("PKR", "Rs", 2, "Pakistan Rupee")
    PLN = CurrencyInfo("PLN", "zł", 2, "Zloty")
    PYG = CurrencyInfo("PYG", "₲", 0, "Guarani")
    QAR = CurrencyInfo("QAR", "QR", 2, "Qatari Rial")
    RON = CurrencyInfo("RON", "lei", 2, "Romanian Leu")
    RSD = CurrencyInfo("RSD", "дин", 2, "Serbian Dinar")
    RUB = CurrencyInfo("RUB", "₽", 2, "Russian Ruble")
    RWF = CurrencyInfo("RWF", "FRw", 0, "Rwanda Franc")
    SAR = CurrencyInfo("SAR", "SR", 2, "Saudi Riyal")
    SBD = CurrencyInfo("SBD", "SI$", 2, "Solomon Islands Dollar")
    SCR = CurrencyInfo("SCR", "SR", 2, "Seychelles Rupee")
    SDG = CurrencyInfo("SDG", "£SD", 2, "Sudanese Pound")
    SEK = CurrencyInfo("SEK", "kr", 2, "Swedish Krona")
    SGD = CurrencyInfo("SGD", "S$", 2, "Singapore Dollar")
    SHP = CurrencyInfo("SHP", "£", 2, "Saint Helena Pound")
    SLE = CurrencyInfo("SLE", "Le", 2, "Leone")
    SLL = CurrencyInfo("SLL", "SLL", 2, "Leone (old)")
    SOS = CurrencyInfo("SOS", "Sh", 2, "Somali Shilling")
    SRD = CurrencyInfo("SRD", "Sr$", 2, "Surinam Dollar")
    SSP = CurrencyInfo("SSP", "SSP", 2, "South Sudanese Pound")
    STN = CurrencyInfo("STN", "Db", 2, "Dobra")
    SVC = CurrencyInfo("SVC", "₡", 2, "El Salvador Colon")
    SYP = CurrencyInfo("SYP", "LS", 2, "Syrian Pound")
    SZL = CurrencyInfo("SZL", "E", 2, "Lilangeni")
    THB = CurrencyInfo("THB", "฿", 2, "Baht")
    TJS = CurrencyInfo("TJS", "SM", 2, "Somoni")
    TMT = CurrencyInfo("TMT", "m", 2, "Turkmenistan New Manat")
    TND = CurrencyInfo("TND", "DT", 3, "Tunisian Dinar")
    TOP = CurrencyInfo("TOP", "T$", 2, "Pa'anga")
    TRY = CurrencyInfo("TRY", "₺", 2, "Turkish Lira")
    TTD = CurrencyInfo("TTD", "TT$", 2, "Trinidad and Tobago Dollar")
    TWD = CurrencyInfo("TWD", "NT$", 2, "New Taiwan Dollar")
    TZS = CurrencyInfo("TZS", "TSh", 2, "Tanzanian Shilling")
    UAH = CurrencyInfo("UAH", "₴", 2, "Hryvnia")
    UGX = CurrencyInfo("UGX", "USh", 0, "Uganda Shilling")
    USD = CurrencyInfo("USD", "$", 2, "US Dollar")
    USN = CurrencyInfo("USN", "USN", 2, "US Dollar (Next day)")
    UYI = CurrencyInfo("UYI", "UYI", 0, "Uruguay Peso en Unidades Indexadas")
    UYU = CurrencyInfo("UYU", "$U", 2, "Peso Uruguayo")
    UYW = CurrencyInfo("UYW", "UYW", 4, "Unidad Previsional")
    UZS = CurrencyInfo("UZS", "сўм", 2, "Uzbekistan Sum")
    VED = CurrencyInfo("VED", "Bs.D", 2, "Bolivar Soberano (digital)")
    VES = CurrencyInfo("VES", "Bs.S", 2, "Bolivar Soberano")
    VND = CurrencyInfo("VND", "₫", 0, "Dong")
    VUV = CurrencyInfo("VUV", "VT", 0, "Vatu")
    WST = CurrencyInfo("WST", "WS$", 2, "Tala")
    XAF = CurrencyInfo("XAF", "FCFA", 0, "CFA Franc BEAC")
    XAG = CurrencyInfo("XAG", "XAG", 0, "Silver")
    XAU = CurrencyInfo("XAU", "XAU", 0, "Gold")
    XBA = CurrencyInfo("XBA", "XBA", 0, "European Composite Unit")
    XBB = CurrencyInfo("XBB", "XBB", 0, "European Monetary Unit")
    XBC = CurrencyInfo("XBC", "XBC", 0, "European Unit of Account 9")
    XBD = CurrencyInfo("XBD", "XBD", 0, "European Unit of Account 17")
    XCD = CurrencyInfo("XCD", "EC$", 2, "East Caribbean Dollar")
    XDR = CurrencyInfo("XDR", "XDR", 0, "SDR (Special Drawing Right)")
    XOF = CurrencyInfo("XOF", "CFA", 0, "CFA Franc BCEAO")
    XPD = CurrencyInfo("XPD", "XPD", 0, "Palladium")
    XPF = CurrencyInfo("XPF", "CFP", 0, "CFP Franc")
    XPT = CurrencyInfo("XPT", "XPT", 0, "Platinum")
    XSU = CurrencyInfo("XSU", "XSU", 0, "Sucre")
    XUA = CurrencyInfo("XUA", "XUA", 0, "ADB Unit of Account")
    YER = CurrencyInfo("YER", "YR", 2, "Yemeni Rial")
    ZAR = CurrencyInfo("ZAR", "R", 2, "Rand")
    ZMW = CurrencyInfo("ZMW", "ZK", 2, "Zambian Kwacha")
    ZWG = CurrencyInfo("ZWG", "ZiG", 2, "Zimbabwe Gold")
    ZWL = CurrencyInfo("ZWL", "Z$", 2, "Zimbabwe Dollar")

    @property
    def code(self) -> str:
        return self.value.code

    @property
    def symbol(self) -> str:
        return self.value.symbol

    @property
    def digits(self) -> int:
        return self.value.digits

    @property
    def display_name(self) -> str:
        return self.value.display_name

    @classmethod
    def from_code(cls, code: str | None) -> "Currency | None":
        """Resolve an ISO-4217 code, ignoring case and whitespace.

        Args:
            code: Raw currency code from the broker (e.g. ``rub``).

        Returns:
            Currency | None: Matching currency, or None when unknown.
        """
        if not code:
            return None
        return cls.__members__.get(code.strip().upper())

    def __str__(self) -> str:
        return self.code


__all__ = ["Currency", "CurrencyInfo"]
