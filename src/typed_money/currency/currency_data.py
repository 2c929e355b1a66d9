"""Static currency dataset.

Rows are `(code, default_scale, description, numeric_code, currency_type)`. A default scale of -1
marks currencies without a sane minor unit (precious metals, bond market and accounting units).
"""

from __future__ import annotations

from typing import Final

from typed_money.currency.currency_record import CurrencyType

_F = CurrencyType.FIAT
_C = CurrencyType.COMMODITY
_K = CurrencyType.CRYPTO
_O = CurrencyType.OTHER

ISO4217: Final[tuple[tuple[str, int, str, int, CurrencyType], ...]] = (
    ("AED", 2, "UAE Dirham", 784, _F),
    ("AFN", 2, "Afghani", 971, _F),
    ("ALL", 2, "Lek", 8, _F),
    ("AMD", 2, "Armenian Dram", 51, _F),
    ("ANG", 2, "Netherlands Antillean Guilder", 532, _F),
    ("AOA", 2, "Kwanza", 973, _F),
    ("ARS", 2, "Argentine Peso", 32, _F),
    ("AUD", 2, "Australian Dollar", 36, _F),
    ("AWG", 2, "Aruban Florin", 533, _F),
    ("AZN", 2, "Azerbaijan Manat", 944, _F),
    ("BAM", 2, "Convertible Mark", 977, _F),
    ("BBD", 2, "Barbados Dollar", 52, _F),
    ("BDT", 2, "Taka", 50, _F),
    ("BGN", 2, "Bulgarian Lev", 975, _F),
    ("BHD", 3, "Bahraini Dinar", 48, _F),
    ("BIF", 0, "Burundi Franc", 108, _F),
    ("BMD", 2, "Bermudian Dollar", 60, _F),
    ("BND", 2, "Brunei Dollar", 96, _F),
    ("BOB", 2, "Boliviano", 68, _F),
    ("BOV", 2, "Mvdol (Bolivian fund code)", 984, _O),
    ("BRL", 2, "Brazilian Real", 986, _F),
    ("BSD", 2, "Bahamian Dollar", 44, _F),
    ("BTN", 2, "Ngultrum", 64, _F),
    ("BWP", 2, "Pula", 72, _F),
    ("BYN", 2, "Belarusian Ruble", 933, _F),
    ("BZD", 2, "Belize Dollar", 84, _F),
    ("CAD", 2, "Canadian Dollar", 124, _F),
    ("CDF", 2, "Congolese Franc", 976, _F),
    ("CHE", 2, "WIR Euro (complementary currency)", 947, _O),
    ("CHF", 2, "Swiss Franc", 756, _F),
    ("CHW", 2, "WIR Franc (complementary currency)", 948, _O),
    ("CLF", 4, "Unidad de Fomento (Chilean unit of account)", 990, _O),
    ("CLP", 0, "Chilean Peso", 152, _F),
    ("CNY", 2, "Yuan Renminbi", 156, _F),
    ("COP", 2, "Colombian Peso", 170, _F),
    ("COU", 2, "Unidad de Valor Real (Colombian unit of account)", 970, _O),
    ("CRC", 2, "Costa Rican Colon", 188, _F),
    ("CUC", 2, "Peso Convertible", 931, _F),
    ("CUP", 2, "Cuban Peso", 192, _F),
    ("CVE", 2, "Cabo Verde Escudo", 132, _F),
    ("CZK", 2, "Czech Koruna", 203, _F),
    ("DJF", 0, "Djibouti Franc", 262, _F),
    ("DKK", 2, "Danish Krone", 208, _F),
    ("DOP", 2, "Dominican Peso", 214, _F),
    ("DZD", 2, "Algerian Dinar", 12, _F),
    ("EGP", 2, "Egyptian Pound", 818, _F),
    ("ERN", 2, "Nakfa", 232, _F),
    ("ETB", 2, "Ethiopian Birr", 230, _F),
    ("EUR", 2, "Euro", 978, _F),
    ("FJD", 2, "Fiji Dollar", 242, _F),
    ("FKP", 2, "Falkland Islands Pound", 238, _F),
    ("GBP", 2, "Pound Sterling", 826, _F),
    ("GEL", 2, "Lari", 981, _F),
    ("GHS", 2, "Ghana Cedi", 936, _F),
    ("GIP", 2, "Gibraltar Pound", 292, _F),
    ("GMD", 2, "Dalasi", 270, _F),
    ("GNF", 0, "Guinean Franc", 324, _F),
    ("GTQ", 2, "Quetzal", 320, _F),
    ("GYD", 2, "Guyana Dollar", 328, _F),
    ("HKD", 2, "Hong Kong Dollar", 344, _F),
    ("HNL", 2, "Lempira", 340, _F),
    ("HTG", 2, "Gourde", 332, _F),
    ("HUF", 2, "Forint", 348, _F),
    ("IDR", 2, "Rupiah", 360, _F),
    ("ILS", 2, "New Israeli Sheqel", 376, _F),
    ("INR", 2, "Indian Rupee", 356, _F),
    ("IQD", 3, "Iraqi Dinar", 368, _F),
    ("IRR", 2, "Iranian Rial", 364, _F),
    ("ISK", 0, "Iceland Krona", 352, _F),
    ("JMD", 2, "Jamaican Dollar", 388, _F),
    ("JOD", 3, "Jordanian Dinar", 400, _F),
    ("JPY", 0, "Yen", 392, _F),
    ("KES", 2, "Kenyan Shilling", 404, _F),
    ("KGS", 2, "Som", 417, _F),
    ("KHR", 2, "Riel", 116, _F),
    ("KMF", 0, "Comorian Franc", 174, _F),
    ("KPW", 2, "North Korean Won", 408, _F),
    ("KRW", 0, "Won", 410, _F),
    ("KWD", 3, "Kuwaiti Dinar", 414, _F),
    ("KYD", 2, "Cayman Islands Dollar", 136, _F),
    ("KZT", 2, "Tenge", 398, _F),
    ("LAK", 2, "Lao Kip", 418, _F),
    ("LBP", 2, "Lebanese Pound", 422, _F),
    ("LKR", 2, "Sri Lanka Rupee", 144, _F),
    ("LRD", 2, "Liberian Dollar", 430, _F),
    ("LSL", 2, "Loti", 426, _F),
    ("LYD", 3, "Libyan Dinar", 434, _F),
    ("MAD", 2, "Moroccan Dirham", 504, _F),
    ("MDL", 2, "Moldovan Leu", 498, _F),
    ("MGA", 2, "Malagasy Ariary", 969, _F),
    ("MKD", 2, "Denar", 807, _F),
    ("MMK", 2, "Kyat", 104, _F),
    ("MNT", 2, "Tugrik", 496, _F),
    ("MOP", 2, "Pataca", 446, _F),
    ("MRU", 2, "Ouguiya", 929, _F),
    ("MUR", 2, "Mauritius Rupee", 480, _F),
    ("MVR", 2, "Rufiyaa", 462, _F),
    ("MWK", 2, "Malawi Kwacha", 454, _F),
    ("MXN", 2, "Mexican Peso", 484, _F),
    ("MXV", 2, "Mexican Unidad de Inversion (UDI)", 979, _O),
    ("MYR", 2, "Malaysian Ringgit", 458, _F),
    ("MZN", 2, "Mozambique Metical", 943, _F),
    ("NAD", 2, "Namibia Dollar", 516, _F),
    ("NGN", 2, "Naira", 566, _F),
    ("NIO", 2, "Cordoba Oro", 558, _F),
    ("NOK", 2, "Norwegian Krone", 578, _F),
    ("NPR", 2, "Nepalese Rupee", 524, _F),
    ("NZD", 2, "New Zealand Dollar", 554, _F),
    ("OMR", 3, "Rial Omani", 512, _F),
    ("PAB", 2, "Balboa", 590, _F),
    ("PEN", 2, "Sol", 604, _F),
    ("PGK", 2, "Kina", 598, _F),
    ("PHP", 2, "Philippine Peso", 608, _F),
    ("PKR", 2, "Pakistan Rupee", 586, _F),
    ("PLN", 2, "Zloty", 985, _F),
    ("PYG", 0, "Guarani", 600, _F),
    ("QAR", 2, "Qatari Rial", 634, _F),
    ("RON", 2, "Romanian Leu", 946, _F),
    ("RSD", 2, "Serbian Dinar", 941, _F),
    ("RUB", 2, "Russian Ruble", 643, _F),
    ("RWF", 0, "Rwanda Franc", 646, _F),
    ("SAR", 2, "Saudi Riyal", 682, _F),
    ("SBD", 2, "Solomon Islands Dollar", 90, _F),
    ("SCR", 2, "Seychelles Rupee", 690, _F),
    ("SDG", 2, "Sudanese Pound", 938, _F),
    ("SEK", 2, "Swedish Krona", 752, _F),
    ("SGD", 2, "Singapore Dollar", 702, _F),
    ("SHP", 2, "Saint Helena Pound", 654, _F),
    ("SLE", 2, "Leone", 925, _F),
    ("SOS", 2, "Somali Shilling", 706, _F),
    ("SRD", 2, "Surinam Dollar", 968, _F),
    ("SSP", 2, "South Sudanese Pound", 728, _F),
    ("STN", 2, "Dobra", 930, _F),
    ("SVC", 2, "El Salvador Colon", 222, _F),
    ("SYP", 2, "Syrian Pound", 760, _F),
    ("SZL", 2, "Lilangeni", 748, _F),
    ("THB", 2, "Baht", 764, _F),
    ("TJS", 2, "Somoni", 972, _F),
    ("TMT", 2, "Turkmenistan New Manat", 934, _F),
    ("TND", 3, "Tunisian Dinar", 788, _F),
    ("TOP", 2, "Pa'anga", 776, _F),
    ("TRY", 2, "Turkish Lira", 949, _F),
    ("TTD", 2, "Trinidad and Tobago Dollar", 780, _F),
    ("TWD", 2, "New Taiwan Dollar", 901, _F),
    ("TZS", 2, "Tanzanian Shilling", 834, _F),
    ("UAH", 2, "Hryvnia", 980, _F),
    ("UGX", 0, "Uganda Shilling", 800, _F),
    ("USD", 2, "US Dollar", 840, _F),
    ("USN", 2, "US Dollar (next day funds)", 997, _O),
    ("UYI", 0, "Uruguay Peso en Unidades Indexadas (UI)", 940, _O),
    ("UYU", 2, "Peso Uruguayo", 858, _F),
    ("UYW", 4, "Unidad Previsional (Uruguayan unit of account)", 927, _O),
    ("UZS", 2, "Uzbekistan Sum", 860, _F),
    ("VED", 2, "Bolivar Soberano (digital)", 926, _F),
    ("VES", 2, "Bolivar Soberano", 928, _F),
    ("VND", 0, "Dong", 704, _F),
    ("VUV", 0, "Vatu", 548, _F),
    ("WST", 2, "Tala", 882, _F),
    ("XAF", 0, "CFA Franc BEAC", 950, _F),
    ("XAG", -1, "Silver (one troy ounce)", 961, _C),
    ("XAU", -1, "Gold (one troy ounce)", 959, _C),
    ("XBA", -1, "Bond Markets Unit European Composite Unit (EURCO)", 955, _O),
    ("XBB", -1, "Bond Markets Unit European Monetary Unit (E.M.U.-6)", 956, _O),
    ("XBC", -1, "Bond Markets Unit European Unit of Account 9 (E.U.A.-9)", 957, _O),
    ("XBD", -1, "Bond Markets Unit European Unit of Account 17 (E.U.A.-17)", 958, _O),
    ("XCD", 2, "East Caribbean Dollar", 951, _F),
    ("XDR", -1, "SDR (Special Drawing Right)", 960, _O),
    ("XOF", 0, "CFA Franc BCEAO", 952, _F),
    ("XPD", -1, "Palladium (one troy ounce)", 964, _C),
    ("XPF", 0, "CFP Franc", 953, _F),
    ("XPT", -1, "Platinum (one troy ounce)", 962, _C),
    ("XSU", -1, "Sucre (ALBA unit of account)", 994, _O),
    ("XTS", -1, "Code reserved for testing purposes", 963, _O),
    ("XUA", -1, "ADB Unit of Account", 965, _O),
    ("XXX", -1, "No currency (transactions without a currency)", 999, _O),
    ("YER", 2, "Yemeni Rial", 886, _F),
    ("ZAR", 2, "Rand", 710, _F),
    ("ZMW", 2, "Zambian Kwacha", 967, _F),
    ("ZWG", 2, "Zimbabwe Gold", 924, _F),
    ("ZWL", 2, "Zimbabwe Dollar", 932, _F),
)

# Non-ISO currencies use lowercase identifiers and numeric code 0
CUSTOM: Final[tuple[tuple[str, int, str, int, CurrencyType], ...]] = (
    ("btc", 8, "Bitcoin (smallest unit: satoshi)", 0, _K),
    ("eth", 18, "Ether (smallest unit: wei)", 0, _K),
    ("usdt", 6, "Tether USD stablecoin", 0, _K),
)

SHORT_SYMBOLS: Final[dict[str, str]] = {
    "AUD": "$",
    "BRL": "R$",
    "CAD": "$",
    "CHF": "Fr.",
    "CNY": "¥",
    "CZK": "Kč",
    "DKK": "kr",
    "EUR": "€",
    "GBP": "£",
    "HKD": "$",
    "HUF": "Ft",
    "ILS": "₪",
    "INR": "₹",
    "JPY": "¥",
    "KRW": "₩",
    "MXN": "$",
    "NGN": "₦",
    "NOK": "kr",
    "NZD": "$",
    "PHP": "₱",
    "PLN": "zł",
    "RUB": "₽",
    "SEK": "kr",
    "SGD": "$",
    "THB": "฿",
    "TRY": "₺",
    "UAH": "₴",
    "USD": "$",
    "VND": "₫",
    "ZAR": "R",
    "btc": "₿",
    "eth": "Ξ",
}

LONG_SYMBOLS: Final[dict[str, str]] = {
    "AUD": "A$",
    "BRL": "R$",
    "CAD": "CA$",
    "CNY": "CN¥",
    "EUR": "€",
    "GBP": "£",
    "HKD": "HK$",
    "ILS": "₪",
    "INR": "₹",
    "JPY": "JP¥",
    "KRW": "₩",
    "MXN": "MX$",
    "NZD": "NZ$",
    "SGD": "S$",
    "USD": "US$",
    "VND": "₫",
    "btc": "₿",
}
