from __future__ import annotations

from typing import Any, Dict, List, Tuple


# e164_cc, iso2_cc, e164_sc, geographic, level, name, example
_ROWS: List[Tuple[str, str, int, bool, int, str, str]] = [
    ("93", "AF", 0, True, 1, "Afghanistan", "701234567"),
    ("358", "AX", 0, True, 1, "Aland Islands", "412345678"),
    ("355", "AL", 0, True, 1, "Albania", "661234567"),
    ("213", "DZ", 0, True, 1, "Algeria", "551234567"),
    ("1684", "AS", 0, True, 2, "American Samoa", "6847331234"),
    ("376", "AD", 0, True, 1, "Andorra", "312345"),
    ("244", "AO", 0, True, 1, "Angola", "923123456"),
    ("1264", "AI", 0, True, 2, "Anguilla", "2642351234"),
    ("672", "AQ", 0, True, 1, "Antarctica", "123456"),
    ("1268", "AG", 0, True, 2, "Antigua and Barbuda", "2684641234"),
    ("54", "AR", 0, True, 1, "Argentina", "91123456789"),
    ("374", "AM", 0, True, 1, "Armenia", "77123456"),
    ("297", "AW", 0, True, 1, "Aruba", "5601234"),
    ("247", "AC", 0, True, 2, "Ascension Island", "40123"),
    ("61", "AU", 0, True, 1, "Australia", "412345678"),
    ("43", "AT", 0, True, 1, "Austria", "664123456"),
    ("994", "AZ", 0, True, 1, "Azerbaijan", "401234567"),
    ("1242", "BS", 0, True, 2, "Bahamas", "2423591234"),
    ("973", "BH", 0, True, 1, "Bahrain", "36001234"),
    ("880", "BD", 0, True, 1, "Bangladesh", "1812345678"),
    ("1246", "BB", 0, True, 2, "Barbados", "2462501234"),
    ("375", "BY", 0, True, 1, "Belarus", "294911911"),
    ("32", "BE", 0, True, 1, "Belgium", "470123456"),
    ("501", "BZ", 0, True, 1, "Belize", "6221234"),
    ("229", "BJ", 0, True, 1, "Benin", "90011234"),
    ("1441", "BM", 0, True, 2, "Bermuda", "4413701234"),
    ("975", "BT", 0, True, 1, "Bhutan", "17123456"),
    ("591", "BO", 0, True, 1, "Bolivia", "71234567"),
    ("387", "BA", 0, True, 1, "Bosnia and Herzegovina", "61123456"),
    ("267", "BW", 0, True, 1, "Botswana", "71123456"),
    ("55", "BR", 0, True, 1, "Brazil", "11961234567"),
    ("246", "IO", 0, True, 1, "British Indian Ocean Territory", "3801234"),
    ("1284", "VG", 0, True, 2, "British Virgin Islands", "2843001234"),
    ("673", "BN", 0, True, 1, "Brunei", "7123456"),
    ("359", "BG", 0, True, 1, "Bulgaria", "48123456"),
    ("226", "BF", 0, True, 1, "Burkina Faso", "70123456"),
    ("257", "BI", 0, True, 1, "Burundi", "79561234"),
    ("855", "KH", 0, True, 1, "Cambodia", "91234567"),
    ("237", "CM", 0, True, 1, "Cameroon", "671234567"),
    ("1", "CA", 2, True, 1, "Canada", "5062345678"),
    ("238", "CV", 0, True, 1, "Cape Verde", "9911234"),
    ("599", "BQ", 0, True, 1, "Caribbean Netherlands", "3181234"),
    ("1345", "KY", 0, True, 2, "Cayman Islands", "3453231234"),
    ("236", "CF", 0, True, 1, "Central African Republic", "70012345"),
    ("235", "TD", 0, True, 1, "Chad", "63012345"),
    ("56", "CL", 0, True, 1, "Chile", "221234567"),
    ("86", "CN", 0, True, 1, "China", "13123456789"),
    ("61", "CX", 0, True, 1, "Christmas Island", "412345678"),
    ("61", "CC", 0, True, 1, "Cocos (Keeling) Islands", "412345678"),
    ("57", "CO", 0, True, 1, "Colombia", "3211234567"),
    ("269", "KM", 0, True, 1, "Comoros", "3212345"),
    ("242", "CG", 0, True, 1, "Congo", "061234567"),
    ("243", "CD", 0, True, 1, "Congo (DRC)", "991234567"),
    ("682", "CK", 0, True, 1, "Cook Islands", "71234"),
    ("506", "CR", 0, True, 1, "Costa Rica", "83123456"),
    ("225", "CI", 0, True, 1, "Cote d'Ivoire", "0123456789"),
    ("385", "HR", 0, True, 1, "Croatia", "921234567"),
    ("53", "CU", 0, True, 1, "Cuba", "51234567"),
    ("599", "CW", 0, True, 1, "Curacao", "95181234"),
    ("357", "CY", 0, True, 1, "Cyprus", "96123456"),
    ("420", "CZ", 0, True, 1, "Czech Republic", "601123456"),
    ("45", "DK", 0, True, 1, "Denmark", "32123456"),
    ("253", "DJ", 0, True, 1, "Djibouti", "77831001"),
    ("1767", "DM", 0, True, 2, "Dominica", "7672251234"),
    ("1809", "DO", 0, True, 2, "Dominican Republic", "8092345678"),
    ("1829", "DO", 0, True, 2, "Dominican Republic", "8292345678"),
    ("1849", "DO", 0, True, 2, "Dominican Republic", "8492345678"),
    ("593", "EC", 0, True, 1, "Ecuador", "991234567"),
    ("20", "EG", 0, True, 1, "Egypt", "1001234567"),
    ("503", "SV", 0, True, 1, "El Salvador", "70123456"),
    ("240", "GQ", 0, True, 1, "Equatorial Guinea", "222123456"),
    ("291", "ER", 0, True, 1, "Eritrea", "7123456"),
    ("372", "EE", 0, True, 1, "Estonia", "51234567"),
    ("268", "SZ", 0, True, 1, "Eswatini", "76123456"),
    ("251", "ET", 0, True, 1, "Ethiopia", "911234567"),
    ("500", "FK", 0, True, 1, "Falkland Islands", "51234"),
    ("298", "FO", 0, True, 1, "Faroe Islands", "211234"),
    ("679", "FJ", 0, True, 1, "Fiji", "7012345"),
    ("358", "FI", 0, True, 1, "Finland", "412345678"),
    ("33", "FR", 0, True, 1, "France", "612345678"),
    ("594", "GF", 0, True, 1, "French Guiana", "694201234"),
    ("689", "PF", 0, True, 1, "French Polynesia", "87123456"),
    ("241", "GA", 0, True, 1, "Gabon", "06031234"),
    ("220", "GM", 0, True, 1, "Gambia", "3012345"),
    ("995", "GE", 0, True, 1, "Georgia", "555123456"),
    ("49", "DE", 0, True, 1, "Germany", "15123456789"),
    ("233", "GH", 0, True, 1, "Ghana", "231234567"),
    ("350", "GI", 0, True, 1, "Gibraltar", "57123456"),
    ("30", "GR", 0, True, 1, "Greece", "6912345678"),
    ("299", "GL", 0, True, 1, "Greenland", "221234"),
    ("1473", "GD", 0, True, 2, "Grenada", "4734031234"),
    ("590", "GP", 0, True, 1, "Guadeloupe", "690001234"),
    ("1671", "GU", 0, True, 2, "Guam", "6713001234"),
    ("502", "GT", 0, True, 1, "Guatemala", "51234567"),
    ("44", "GG", 0, True, 1, "Guernsey", "7781123456"),
    ("224", "GN", 0, True, 1, "Guinea", "601123456"),
    ("245", "GW", 0, True, 1, "Guinea-Bissau", "955012345"),
    ("592", "GY", 0, True, 1, "Guyana", "6091234"),
    ("509", "HT", 0, True, 1, "Haiti", "34101234"),
    ("504", "HN", 0, True, 1, "Honduras", "91234567"),
    ("852", "HK", 0, True, 1, "Hong Kong", "51234567"),
    ("36", "HU", 0, True, 1, "Hungary", "201234567"),
    ("354", "IS", 0, True, 1, "Iceland", "6111234"),
    ("91", "IN", 0, True, 1, "India", "8123456789"),
    ("62", "ID", 0, True, 1, "Indonesia", "812345678"),
    ("98", "IR", 0, True, 1, "Iran", "9123456789"),
    ("964", "IQ", 0, True, 1, "Iraq", "7912345678"),
    ("353", "IE", 0, True, 1, "Ireland", "850123456"),
    ("44", "IM", 0, True, 1, "Isle of Man", "7924123456"),
    ("972", "IL", 0, True, 1, "Israel", "502345678"),
    ("39", "IT", 0, True, 1, "Italy", "3123456789"),
    ("1876", "JM", 0, True, 2, "Jamaica", "8762101234"),
    ("81", "JP", 0, True, 1, "Japan", "9012345678"),
    ("44", "JE", 0, True, 1, "Jersey", "7797123456"),
    ("962", "JO", 0, True, 1, "Jordan", "790123456"),
    ("7", "KZ", 0, True, 1, "Kazakhstan", "7710009998"),
    ("254", "KE", 0, True, 1, "Kenya", "712123456"),
    ("686", "KI", 0, True, 1, "Kiribati", "72012345"),
    ("383", "XK", 0, True, 1, "Kosovo", "43201234"),
    ("965", "KW", 0, True, 1, "Kuwait", "50012345"),
    ("996", "KG", 0, True, 1, "Kyrgyzstan", "700123456"),
    ("856", "LA", 0, True, 1, "Laos", "2023123456"),
    ("371", "LV", 0, True, 1, "Latvia", "21234567"),
    ("961", "LB", 0, True, 1, "Lebanon", "71123456"),
    ("266", "LS", 0, True, 1, "Lesotho", "50123456"),
    ("231", "LR", 0, True, 1, "Liberia", "770123456"),
    ("218", "LY", 0, True, 1, "Libya", "912345678"),
    ("423", "LI", 0, True, 1, "Liechtenstein", "660234567"),
    ("370", "LT", 0, True, 1, "Lithuania", "61234567"),
    ("352", "LU", 0, True, 1, "Luxembourg", "628123456"),
    ("853", "MO", 0, True, 1, "Macau", "66123456"),
    ("261", "MG", 0, True, 1, "Madagascar", "321234567"),
    ("265", "MW", 0, True, 1, "Malawi", "991234567"),
    ("60", "MY", 0, True, 1, "Malaysia", "123456789"),
    ("960", "MV", 0, True, 1, "Maldives", "7712345"),
    ("223", "ML", 0, True, 1, "Mali", "65012345"),
    ("356", "MT", 0, True, 1, "Malta", "96961234"),
    ("692", "MH", 0, True, 1, "Marshall Islands", "2351234"),
    ("596", "MQ", 0, True, 1, "Martinique", "696201234"),
    ("222", "MR", 0, True, 1, "Mauritania", "22123456"),
    ("230", "MU", 0, True, 1, "Mauritius", "52512345"),
    ("262", "YT", 0, True, 1, "Mayotte", "639012345"),
    ("52", "MX", 0, True, 1, "Mexico", "12221234567"),
    ("691", "FM", 0, True, 1, "Micronesia", "3501234"),
    ("373", "MD", 0, True, 1, "Moldova", "62112345"),
    ("377", "MC", 0, True, 1, "Monaco", "612345678"),
    ("976", "MN", 0, True, 1, "Mongolia", "88123456"),
    ("382", "ME", 0, True, 1, "Montenegro", "67622901"),
    ("1664", "MS", 0, True, 2, "Montserrat", "6644923456"),
    ("212", "MA", 0, True, 1, "Morocco", "650123456"),
    ("258", "MZ", 0, True, 1, "Mozambique", "821234567"),
    ("95", "MM", 0, True, 1, "Myanmar", "92123456"),
    ("264", "NA", 0, True, 1, "Namibia", "811234567"),
    ("674", "NR", 0, True, 1, "Nauru", "5551234"),
    ("977", "NP", 0, True, 1, "Nepal", "9841234567"),
    ("31", "NL", 0, True, 1, "Netherlands", "612345678"),
    ("687", "NC", 0, True, 1, "New Caledonia", "751234"),
    ("64", "NZ", 0, True, 1, "New Zealand", "211234567"),
    ("505", "NI", 0, True, 1, "Nicaragua", "81234567"),
    ("227", "NE", 0, True, 1, "Niger", "93123456"),
    ("234", "NG", 0, True, 1, "Nigeria", "8021234567"),
    ("683", "NU", 0, True, 1, "Niue", "8884012"),
    ("672", "NF", 0, True, 1, "Norfolk Island", "381234"),
    ("850", "KP", 0, True, 1, "North Korea", "1921234567"),
    ("389", "MK", 0, True, 1, "North Macedonia", "72345678"),
    ("1670", "MP", 0, True, 2, "Northern Mariana Islands", "6702345678"),
    ("47", "NO", 0, True, 1, "Norway", "40612345"),
    ("968", "OM", 0, True, 1, "Oman", "92123456"),
    ("92", "PK", 0, True, 1, "Pakistan", "3012345678"),
    ("680", "PW", 0, True, 1, "Palau", "6201234"),
    ("970", "PS", 0, True, 1, "Palestine", "599123456"),
    ("507", "PA", 0, True, 1, "Panama", "61234567"),
    ("675", "PG", 0, True, 1, "Papua New Guinea", "70123456"),
    ("595", "PY", 0, True, 1, "Paraguay", "961456789"),
    ("51", "PE", 0, True, 1, "Peru", "912345678"),
    ("63", "PH", 0, True, 1, "Philippines", "9051234567"),
    ("64", "PN", 0, True, 1, "Pitcairn Islands", "211234567"),
    ("48", "PL", 0, True, 1, "Poland", "512345678"),
    ("351", "PT", 0, True, 1, "Portugal", "912345678"),
    ("1787", "PR", 0, True, 2, "Puerto Rico", "7872345678"),
    ("1939", "PR", 0, True, 2, "Puerto Rico", "9392345678"),
    ("974", "QA", 0, True, 1, "Qatar", "33123456"),
    ("262", "RE", 0, True, 1, "Reunion", "692123456"),
    ("40", "RO", 0, True, 1, "Romania", "712034567"),
    ("7", "RU", 0, True, 1, "Russia", "9123456789"),
    ("250", "RW", 0, True, 1, "Rwanda", "720123456"),
    ("590", "BL", 0, True, 1, "Saint Barthelemy", "690001234"),
    ("290", "SH", 0, True, 1, "Saint Helena", "51234"),
    ("1869", "KN", 0, True, 2, "Saint Kitts and Nevis", "8697652917"),
    ("1758", "LC", 0, True, 2, "Saint Lucia", "7582845678"),
    ("590", "MF", 0, True, 1, "Saint Martin", "690001234"),
    ("508", "PM", 0, True, 1, "Saint Pierre and Miquelon", "551234"),
    ("1784", "VC", 0, True, 2, "Saint Vincent and the Grenadines", "7844301234"),
    ("685", "WS", 0, True, 1, "Samoa", "7212345"),
    ("378", "SM", 0, True, 1, "San Marino", "66661212"),
    ("239", "ST", 0, True, 1, "Sao Tome and Principe", "9812345"),
    ("966", "SA", 0, True, 1, "Saudi Arabia", "512345678"),
    ("221", "SN", 0, True, 1, "Senegal", "701234567"),
    ("381", "RS", 0, True, 1, "Serbia", "601234567"),
    ("248", "SC", 0, True, 1, "Seychelles", "2510123"),
    ("232", "SL", 0, True, 1, "Sierra Leone", "25123456"),
    ("65", "SG", 0, True, 1, "Singapore", "81234567"),
    ("1721", "SX", 0, True, 2, "Sint Maarten", "7215205678"),
    ("421", "SK", 0, True, 1, "Slovakia", "912123456"),
    ("386", "SI", 0, True, 1, "Slovenia", "31234567"),
    ("677", "SB", 0, True, 1, "Solomon Islands", "7421234"),
    ("252", "SO", 0, True, 1, "Somalia", "71123456"),
    ("27", "ZA", 0, True, 1, "South Africa", "711234567"),
    ("500", "GS", 0, True, 1, "South Georgia and the South Sandwich Islands", "51234"),
    ("82", "KR", 0, True, 1, "South Korea", "1020000000"),
    ("211", "SS", 0, True, 1, "South Sudan", "977123456"),
    ("34", "ES", 0, True, 1, "Spain", "612345678"),
    ("94", "LK", 0, True, 1, "Sri Lanka", "712345678"),
    ("249", "SD", 0, True, 1, "Sudan", "911231234"),
    ("597", "SR", 0, True, 1, "Suriname", "7412345"),
    ("47", "SJ", 0, True, 1, "Svalbard and Jan Mayen", "41234567"),
    ("46", "SE", 0, True, 1, "Sweden", "701234567"),
    ("41", "CH", 0, True, 1, "Switzerland", "781234567"),
    ("963", "SY", 0, True, 1, "Syria", "944567890"),
    ("886", "TW", 0, True, 1, "Taiwan", "912345678"),
    ("992", "TJ", 0, True, 1, "Tajikistan", "917123456"),
    ("255", "TZ", 0, True, 1, "Tanzania", "621234567"),
    ("66", "TH", 0, True, 1, "Thailand", "812345678"),
    ("670", "TL", 0, True, 1, "Timor-Leste", "77212345"),
    ("228", "TG", 0, True, 1, "Togo", "90112345"),
    ("690", "TK", 0, True, 1, "Tokelau", "7290"),
    ("676", "TO", 0, True, 1, "Tonga", "7715123"),
    ("1868", "TT", 0, True, 2, "Trinidad and Tobago", "8682911234"),
    ("290", "TA", 0, True, 2, "Tristan da Cunha", "8123"),
    ("216", "TN", 0, True, 1, "Tunisia", "20123456"),
    ("90", "TR", 0, True, 1, "Turkey", "5012345678"),
    ("993", "TM", 0, True, 1, "Turkmenistan", "66123456"),
    ("1649", "TC", 0, True, 2, "Turks and Caicos Islands", "6492311234"),
    ("688", "TV", 0, True, 1, "Tuvalu", "901234"),
    ("1340", "VI", 0, True, 2, "U.S. Virgin Islands", "3406421234"),
    ("256", "UG", 0, True, 1, "Uganda", "712345678"),
    ("380", "UA", 0, True, 1, "Ukraine", "501234567"),
    ("971", "AE", 0, True, 1, "United Arab Emirates", "501234567"),
    ("44", "GB", 0, True, 1, "United Kingdom", "7400123456"),
    ("1", "US", 0, True, 1, "United States", "2012345678"),
    ("598", "UY", 0, True, 1, "Uruguay", "94231234"),
    ("998", "UZ", 0, True, 1, "Uzbekistan", "912345678"),
    ("678", "VU", 0, True, 1, "Vanuatu", "5912345"),
    ("39", "VA", 0, True, 1, "Vatican City", "3123456789"),
    ("58", "VE", 0, True, 1, "Venezuela", "4121234567"),
    ("84", "VN", 0, True, 1, "Vietnam", "912345678"),
    ("681", "WF", 0, True, 1, "Wallis and Futuna", "821234"),
    ("212", "EH", 0, True, 1, "Western Sahara", "650123456"),
    ("967", "YE", 0, True, 1, "Yemen", "712345678"),
    ("260", "ZM", 0, True, 1, "Zambia", "955123456"),
    ("263", "ZW", 0, True, 1, "Zimbabwe", "712345678"),
]


def _entry(
    e164_cc: str,
    iso2_cc: str,
    e164_sc: int,
    geographic: bool,
    level: int,
    name: str,
    example: str,
) -> Dict[str, Any]:
    return {
        "e164_cc": e164_cc,
        "iso2_cc": iso2_cc,
        "e164_sc": e164_sc,
        "geographic": geographic,
        "level": level,
        "name": name,
        "example": example,
        "display_name": f"{name} ({iso2_cc}) [+{e164_cc}]",
        "full_example_with_plus_sign": f"+{e164_cc}{example}",
        "display_name_no_e164_cc": f"{name} ({iso2_cc})",
        "e164_key": f"{e164_cc}-{iso2_cc}-{e164_sc}",
    }


COUNTRY_CODES: List[Dict[str, Any]] = [_entry(*row) for row in _ROWS]
