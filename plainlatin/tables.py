"""Curated code point tables, one per category, keyed by replacement.

An empty replacement means the code point is dropped. Tables are listed in
precedence order in ``CATEGORY_TABLES``; a code point belongs to at most one.
Coverage follows Unicode 17.0.
"""

from typing import Dict, FrozenSet, Tuple

from .types import Category

NON_GLYPH: Dict[str, Tuple[int, ...]] = {
    "": (
        0x00000, 0x00001, 0x00002, 0x00003, 0x00004, 0x00005, 0x00006, 0x00007,
        0x00008, 0x0000E, 0x0000F, 0x00010, 0x00011, 0x00012, 0x00013, 0x00014,
        0x00015, 0x00016, 0x00017, 0x00018, 0x00019, 0x0001A, 0x0001B, 0x0001C,
        0x0001D, 0x0001E, 0x0001F, 0x0007F, 0x00080, 0x00081, 0x00082, 0x00083,
        0x00084, 0x00086, 0x00087, 0x00088, 0x00089, 0x0008A, 0x0008B, 0x0008C,
        0x0008D, 0x0008E, 0x0008F, 0x00090, 0x00091, 0x00092, 0x00093, 0x00094,
        0x00095, 0x00096, 0x00097, 0x00098, 0x00099, 0x0009A, 0x0009B, 0x0009C,
        0x0009D, 0x0009E, 0x0009F, 0x0180E, 0x02400, 0x02401, 0x02402, 0x02403,
        0x02404, 0x02405, 0x02406, 0x02407, 0x02408, 0x02409, 0x0240A, 0x0240B,
        0x0240C, 0x0240D, 0x0240E, 0x0240F, 0x02410, 0x02411, 0x02412, 0x02413,
        0x02414, 0x02415, 0x02416, 0x02417, 0x02418, 0x02419, 0x0241A, 0x0241B,
        0x0241C, 0x0241D, 0x0241E, 0x0241F, 0x02421,
    ),
}


DIACRITIC: Dict[str, Tuple[int, ...]] = {
    "A": (
        0x000C0, 0x000C1, 0x000C2, 0x000C3, 0x000C4, 0x000C5, 0x00100, 0x00102,
        0x00104, 0x001CD, 0x001DE, 0x001E0, 0x001FA, 0x00200, 0x00202, 0x00226,
        0x01E00, 0x01EA0, 0x01EA2, 0x01EA4, 0x01EA6, 0x01EA8, 0x01EAA, 0x01EAC,
        0x01EAE, 0x01EB0, 0x01EB2, 0x01EB4, 0x01EB6,
    ),
    "C": (0x000C7, 0x00106, 0x00108, 0x0010A, 0x0010C, 0x01E08),
    "E": (
        0x000C8, 0x000C9, 0x000CA, 0x000CB, 0x00112, 0x00114, 0x00116, 0x00118,
        0x0011A, 0x00204, 0x00206, 0x00228, 0x01E14, 0x01E16, 0x01E18, 0x01E1A,
        0x01E1C, 0x01EB8, 0x01EBA, 0x01EBC, 0x01EBE, 0x01EC0, 0x01EC2, 0x01EC4,
        0x01EC6,
    ),
    "I": (
        0x000CC, 0x000CD, 0x000CE, 0x000CF, 0x00128, 0x0012A, 0x0012C, 0x0012E,
        0x00130, 0x001CF, 0x00208, 0x0020A, 0x01E2C, 0x01E2E, 0x01EC8, 0x01ECA,
    ),
    "N": (
        0x000D1, 0x00143, 0x00145, 0x00147, 0x001F8, 0x01E44, 0x01E46, 0x01E48,
        0x01E4A,
    ),
    "O": (
        0x000D2, 0x000D3, 0x000D4, 0x000D5, 0x000D6, 0x0014C, 0x0014E, 0x00150,
        0x001A0, 0x001D1, 0x001EA, 0x001EC, 0x0020C, 0x0020E, 0x0022A, 0x0022C,
        0x0022E, 0x00230, 0x01E4C, 0x01E4E, 0x01E50, 0x01E52, 0x01ECC, 0x01ECE,
        0x01ED0, 0x01ED2, 0x01ED4, 0x01ED6, 0x01ED8, 0x01EDA, 0x01EDC, 0x01EDE,
        0x01EE0, 0x01EE2,
    ),
    "U": (
        0x000D9, 0x000DA, 0x000DB, 0x000DC, 0x00168, 0x0016A, 0x0016C, 0x0016E,
        0x00170, 0x00172, 0x001AF, 0x001D3, 0x001D5, 0x001D7, 0x001D9, 0x001DB,
        0x00214, 0x00216, 0x01E72, 0x01E74, 0x01E76, 0x01E78, 0x01E7A, 0x01EE4,
        0x01EE6, 0x01EE8, 0x01EEA, 0x01EEC, 0x01EEE, 0x01EF0,
    ),
    "Y": (
        0x000DD, 0x00176, 0x00178, 0x00232, 0x01E8E, 0x01EF2, 0x01EF4, 0x01EF6,
        0x01EF8,
    ),
    "a": (
        0x000E0, 0x000E1, 0x000E2, 0x000E3, 0x000E4, 0x000E5, 0x00101, 0x00103,
        0x00105, 0x001CE, 0x001DF, 0x001E1, 0x001FB, 0x00201, 0x00203, 0x00227,
        0x01E01, 0x01EA1, 0x01EA3, 0x01EA5, 0x01EA7, 0x01EA9, 0x01EAB, 0x01EAD,
        0x01EAF, 0x01EB1, 0x01EB3, 0x01EB5, 0x01EB7,
    ),
    "c": (0x000E7, 0x00107, 0x00109, 0x0010B, 0x0010D, 0x01E09),
    "e": (
        0x000E8, 0x000E9, 0x000EA, 0x000EB, 0x00113, 0x00115, 0x00117, 0x00119,
        0x0011B, 0x00205, 0x00207, 0x00229, 0x01E15, 0x01E17, 0x01E19, 0x01E1B,
        0x01E1D, 0x01EB9, 0x01EBB, 0x01EBD, 0x01EBF, 0x01EC1, 0x01EC3, 0x01EC5,
        0x01EC7,
    ),
    "i": (
        0x000EC, 0x000ED, 0x000EE, 0x000EF, 0x00129, 0x0012B, 0x0012D, 0x0012F,
        0x001D0, 0x00209, 0x0020B, 0x01E2D, 0x01E2F, 0x01EC9, 0x01ECB,
    ),
    "n": (
        0x000F1, 0x00144, 0x00146, 0x00148, 0x001F9, 0x01E45, 0x01E47, 0x01E49,
        0x01E4B,
    ),
    "o": (
        0x000F2, 0x000F3, 0x000F4, 0x000F5, 0x000F6, 0x0014D, 0x0014F, 0x00151,
        0x001A1, 0x001D2, 0x001EB, 0x001ED, 0x0020D, 0x0020F, 0x0022B, 0x0022D,
        0x0022F, 0x00231, 0x01E4D, 0x01E4F, 0x01E51, 0x01E53, 0x01ECD, 0x01ECF,
        0x01ED1, 0x01ED3, 0x01ED5, 0x01ED7, 0x01ED9, 0x01EDB, 0x01EDD, 0x01EDF,
        0x01EE1, 0x01EE3,
    ),
    "u": (
        0x000F9, 0x000FA, 0x000FB, 0x000FC, 0x00169, 0x0016B, 0x0016D, 0x0016F,
        0x00171, 0x00173, 0x001B0, 0x001D4, 0x001D6, 0x001D8, 0x001DA, 0x001DC,
        0x00215, 0x00217, 0x01E73, 0x01E75, 0x01E77, 0x01E79, 0x01E7B, 0x01EE5,
        0x01EE7, 0x01EE9, 0x01EEB, 0x01EED, 0x01EEF, 0x01EF1,
    ),
    "y": (
        0x000FD, 0x000FF, 0x00177, 0x00233, 0x01E8F, 0x01E99, 0x01EF3, 0x01EF5,
        0x01EF7, 0x01EF9,
    ),
    "D": (0x0010E, 0x01E0A, 0x01E0C, 0x01E0E, 0x01E10, 0x01E12),
    "G": (
        0x0011C, 0x0011E, 0x00120, 0x00122, 0x001E6, 0x001F4, 0x01E20,
    ),
    "H": (
        0x00124, 0x0021E, 0x01E22, 0x01E24, 0x01E26, 0x01E28, 0x01E2A,
    ),
    "J": (0x00134,),
    "K": (0x00136, 0x001E8, 0x01E30, 0x01E32, 0x01E34),
    "L": (
        0x00139, 0x0013B, 0x0013D, 0x01E36, 0x01E38, 0x01E3A, 0x01E3C,
    ),
    "R": (
        0x00154, 0x00156, 0x00158, 0x00210, 0x00212, 0x01E58, 0x01E5A, 0x01E5C,
        0x01E5E,
    ),
    "S": (
        0x0015A, 0x0015C, 0x0015E, 0x00160, 0x00218, 0x01E60, 0x01E62, 0x01E64,
        0x01E66, 0x01E68,
    ),
    "T": (
        0x00162, 0x00164, 0x0021A, 0x01E6A, 0x01E6C, 0x01E6E, 0x01E70,
    ),
    "W": (0x00174, 0x01E80, 0x01E82, 0x01E84, 0x01E86, 0x01E88),
    "Z": (0x00179, 0x0017B, 0x0017D, 0x01E90, 0x01E92, 0x01E94),
    "d": (0x0010F, 0x01E0B, 0x01E0D, 0x01E0F, 0x01E11, 0x01E13),
    "g": (
        0x0011D, 0x0011F, 0x00121, 0x00123, 0x001E7, 0x001F5, 0x01E21,
    ),
    "h": (
        0x00125, 0x0021F, 0x01E23, 0x01E25, 0x01E27, 0x01E29, 0x01E2B, 0x01E96,
    ),
    "j": (0x00135, 0x001F0),
    "k": (0x00137, 0x001E9, 0x01E31, 0x01E33, 0x01E35),
    "l": (
        0x0013A, 0x0013C, 0x0013E, 0x01E37, 0x01E39, 0x01E3B, 0x01E3D,
    ),
    "r": (
        0x00155, 0x00157, 0x00159, 0x00211, 0x00213, 0x01E59, 0x01E5B, 0x01E5D,
        0x01E5F,
    ),
    "s": (
        0x0015B, 0x0015D, 0x0015F, 0x00161, 0x00219, 0x01E61, 0x01E63, 0x01E65,
        0x01E67, 0x01E69,
    ),
    "t": (
        0x00163, 0x00165, 0x0021B, 0x01E6B, 0x01E6D, 0x01E6F, 0x01E71, 0x01E97,
    ),
    "w": (
        0x00175, 0x01E81, 0x01E83, 0x01E85, 0x01E87, 0x01E89, 0x01E98,
    ),
    "z": (0x0017A, 0x0017C, 0x0017E, 0x01E91, 0x01E93, 0x01E95),
    "B": (0x01E02, 0x01E04, 0x01E06),
    "F": (0x01E1E,),
    "M": (0x01E3E, 0x01E40, 0x01E42),
    "P": (0x01E54, 0x01E56),
    "V": (0x01E7C, 0x01E7E),
    "X": (0x01E8A, 0x01E8C),
    "b": (0x01E03, 0x01E05, 0x01E07),
    "f": (0x01E1F,),
    "m": (0x01E3F, 0x01E41, 0x01E43),
    "p": (0x01E55, 0x01E57),
    "v": (0x01E7D, 0x01E7F),
    "x": (0x01E8B, 0x01E8D),
}


LIGATURE: Dict[str, Tuple[int, ...]] = {
    "AE": (0x000C6, 0x001FC, 0x001E2),
    "ae": (0x000E6, 0x001FD, 0x001E3),
    "ss": (0x000DF,),
    "th": (0x000FE,),
    "IJ": (0x00132,),
    "OE": (0x00152,),
    "ij": (0x00133,),
    "oe": (0x00153,),
    "OI": (0x001A2,),
    "DZ": (0x001C4, 0x001F1),
    "LJ": (0x001C7,),
    "NJ": (0x001CA,),
    "HV": (0x001F6,),
    "OU": (0x00222,),
    "Dz": (0x001C5, 0x001F2),
    "Lj": (0x001C8,),
    "Nj": (0x001CB,),
    "hv": (0x00195,),
    "oi": (0x001A3,),
    "dz": (0x001C6, 0x001F3),
    "lj": (0x001C9,),
    "nj": (0x001CC,),
    "ou": (0x00223,),
    "db": (0x00238,),
    "qp": (0x00239,),
    "SS": (0x01E9E,),
    "LL": (0x01EFA,),
    "ll": (0x01EFB,),
    "&": (0x0204A, 0x02E52),
    "AA": (0x0A732,),
    "AO": (0x0A734,),
    "AU": (0x0A736,),
    "AV": (0x0A738, 0x0A73A),
    "AY": (0x0A73C,),
    "OO": (0x0A74E,),
    "THTH": (0x0A7D2,),
    "TZ": (0x0A728,),
    "WW": (0x0A7D4,),
    "aa": (0x0A733,),
    "ao": (0x0A735,),
    "au": (0x0A737,),
    "av": (0x0A739, 0x0A73B),
    "ay": (0x0A73D,),
    "oo": (0x0A74F,),
    "tz": (0x0A729,),
    "ff": (0x0FB00,),
    "fi": (0x0FB01,),
    "fl": (0x0FB02,),
    "ffi": (0x0FB03,),
    "ffl": (0x0FB04,),
    "ft": (0x0FB05,),
    "st": (0x0FB06,),
    "ue": (0x01D6B,),
}


SUPER_SUBSCRIPT: Dict[str, Tuple[int, ...]] = {
    "a": (0x000AA, 0x02090),
    "o": (0x000BA, 0x02092),
    "e": (0x02091, 0x02094),
    "h": (0x02095,),
    "i": (0x02071,),
    "k": (0x02096,),
    "l": (0x02097,),
    "m": (0x02098,),
    "n": (0x0207F, 0x02099),
    "p": (0x0209A,),
    "s": (0x0209B,),
    "t": (0x0209C,),
    "x": (0x02093,),
    "c": (0x0A770,),
    "j": (0x02C7C,),
    "v": (0x02C7D,),
}


ITEMIZED: Dict[str, Tuple[int, ...]] = {
    "0": (0x1CCF0,),
    "1": (0x1CCF1,),
    "2": (0x1CCF2,),
    "3": (0x1CCF3,),
    "4": (0x1CCF4,),
    "5": (0x1CCF5,),
    "6": (0x1CCF6,),
    "7": (0x1CCF7,),
    "8": (0x1CCF8,),
    "9": (0x1CCF9,),
    "a": (0x0249C, 0x024D0),
    "b": (0x0249D, 0x024D1),
    "c": (0x0249E, 0x024D2),
    "d": (0x0249F, 0x024D3, 0x1F1A5),
    "e": (0x024A0, 0x024D4),
    "f": (0x024A1, 0x024D5),
    "g": (0x024A2, 0x024D6),
    "h": (0x024A3, 0x024D7),
    "i": (0x024A4, 0x024D8),
    "j": (0x024A5, 0x024D9),
    "k": (0x024A6, 0x024DA),
    "l": (0x024A7, 0x024DB),
    "m": (0x024A8, 0x024DC),
    "n": (0x024A9, 0x024DD),
    "o": (0x024AA, 0x024DE),
    "p": (0x024AB, 0x024DF),
    "q": (0x024AC, 0x024E0),
    "r": (0x024AD, 0x024E1),
    "s": (0x024AE, 0x024E2),
    "t": (0x024AF, 0x024E3),
    "u": (0x024B0, 0x024E4),
    "v": (0x024B1, 0x024E5),
    "w": (0x024B2, 0x024E6),
    "x": (0x024B3, 0x024E7),
    "y": (0x024B4, 0x024E8),
    "z": (0x024B5, 0x024E9),
    "A": (
        0x024B6, 0x1CCD6, 0x1F110, 0x1F130, 0x1F150, 0x1F170, 0x1F1E6,
    ),
    "B": (
        0x024B7, 0x1CCD7, 0x1F111, 0x1F131, 0x1F151, 0x1F171, 0x1F1E7,
    ),
    "C": (
        0x024B8, 0x1CCD8, 0x1F112, 0x1F132, 0x1F152, 0x1F172, 0x1F1E8,
    ),
    "D": (
        0x024B9, 0x1CCD9, 0x1F113, 0x1F133, 0x1F153, 0x1F173, 0x1F1E9,
    ),
    "E": (
        0x024BA, 0x1CCDA, 0x1F114, 0x1F134, 0x1F154, 0x1F174, 0x1F1EA,
    ),
    "F": (
        0x024BB, 0x1CCDB, 0x1F115, 0x1F135, 0x1F155, 0x1F175, 0x1F1EB,
    ),
    "G": (
        0x024BC, 0x1CCDC, 0x1F116, 0x1F136, 0x1F156, 0x1F176, 0x1F1EC,
    ),
    "H": (
        0x024BD, 0x1CCDD, 0x1F117, 0x1F137, 0x1F157, 0x1F177, 0x1F1ED,
    ),
    "I": (
        0x024BE, 0x1CCDE, 0x1F118, 0x1F138, 0x1F158, 0x1F178, 0x1F1EE,
    ),
    "J": (
        0x024BF, 0x1CCDF, 0x1F119, 0x1F139, 0x1F159, 0x1F179, 0x1F1EF,
    ),
    "K": (
        0x024C0, 0x1CCE0, 0x1F11A, 0x1F13A, 0x1F15A, 0x1F17A, 0x1F1F0,
    ),
    "L": (
        0x024C1, 0x1CCE1, 0x1F11B, 0x1F13B, 0x1F15B, 0x1F17B, 0x1F1F1,
    ),
    "M": (
        0x024C2, 0x1CCE2, 0x1F11C, 0x1F13C, 0x1F15C, 0x1F17C, 0x1F1F2,
    ),
    "N": (
        0x024C3, 0x1CCE3, 0x1F11D, 0x1F13D, 0x1F15D, 0x1F17D, 0x1F1F3,
    ),
    "O": (
        0x024C4, 0x1CCE4, 0x1F11E, 0x1F13E, 0x1F15E, 0x1F17E, 0x1F1F4,
    ),
    "P": (
        0x024C5, 0x1CCE5, 0x1F11F, 0x1F13F, 0x1F15F, 0x1F17F, 0x1F1F5,
    ),
    "Q": (
        0x024C6, 0x1CCE6, 0x1F120, 0x1F140, 0x1F160, 0x1F180, 0x1F1F6,
    ),
    "R": (
        0x024C7, 0x1CCE7, 0x1F121, 0x1F141, 0x1F161, 0x1F181, 0x1F1F7,
    ),
    "S": (
        0x024C8, 0x1CCE8, 0x1F122, 0x1F142, 0x1F162, 0x1F182, 0x1F1F8,
    ),
    "T": (
        0x024C9, 0x1CCE9, 0x1F123, 0x1F143, 0x1F163, 0x1F183, 0x1F1F9,
    ),
    "U": (
        0x024CA, 0x1CCEA, 0x1F124, 0x1F144, 0x1F164, 0x1F184, 0x1F1FA,
    ),
    "V": (
        0x024CB, 0x1CCEB, 0x1F125, 0x1F145, 0x1F165, 0x1F185, 0x1F1FB,
    ),
    "W": (
        0x024CC, 0x1CCEC, 0x1F126, 0x1F146, 0x1F166, 0x1F186, 0x1F1FC,
    ),
    "X": (
        0x024CD, 0x1CCED, 0x1F127, 0x1F147, 0x1F167, 0x1F187, 0x1F1FD,
    ),
    "Y": (
        0x024CE, 0x1CCEE, 0x1F128, 0x1F148, 0x1F168, 0x1F188, 0x1F1FE,
    ),
    "Z": (
        0x024CF, 0x1CCEF, 0x1F129, 0x1F149, 0x1F169, 0x1F189, 0x1F1FF,
    ),
}


# Non-composite letters normalized to the Latin glyph they were derived from,
# not to the sound they represent.
ADOPTED: Dict[str, Tuple[int, ...]] = {
    "O": (
        0x000D8, 0x00186, 0x0019F, 0x001FE, 0x0A74A, 0x0A74C, 0x0A7C0,
    ),
    "o": (
        0x000F8, 0x001FF, 0x02C7A, 0x0A74B, 0x0A74D, 0x0A7C1, 0x0AB3D, 0x0AB3E,
        0x0AB3F,
    ),
    "DH": (0x000D0,),
    "TH": (0x000DE, 0x0A764, 0x0A766),
    "dh": (0x000F0,),
    "D": (0x00110, 0x00189, 0x0018A, 0x0018B, 0x0A779, 0x0A7C7),
    "H": (0x00126, 0x02C67, 0x0A726, 0x0A7AA),
    "L": (
        0x0013F, 0x00141, 0x0023D, 0x02C60, 0x02C62, 0x0A748, 0x0A780, 0x0A7AD,
    ),
    "T": (0x00166, 0x001AC, 0x001AE, 0x0023E, 0x0A786),
    "d": (0x00111, 0x0018C, 0x00221, 0x0A771, 0x0A77A, 0x0A7C8),
    "h": (0x00127, 0x02C68, 0x0A727, 0x0A795),
    "i": (0x00131,),
    "k": (
        0x00138, 0x00199, 0x02C6A, 0x0A741, 0x0A743, 0x0A745, 0x0A7A3,
    ),
    "l": (
        0x00140, 0x00142, 0x0019A, 0x00234, 0x02C61, 0x0A749, 0x0A772, 0x0A781,
        0x0AB37, 0x0AB38, 0x0AB39,
    ),
    "s": (
        0x0017F, 0x0023F, 0x01E9B, 0x01E9C, 0x01E9D, 0x0A76D, 0x0A778, 0x0A785,
        0x0A7A9, 0x0A7CA, 0x0A7D7, 0x0A7D9, 0x0AB4D,
    ),
    "t": (
        0x00167, 0x001AB, 0x001AD, 0x00236, 0x02C66, 0x0A777, 0x0A787,
    ),
    "NG": (0x0014A,),
    "ng": (0x0014B, 0x0AB3C),
    "'n": (0x00149,),
    "A": (0x0023A,),
    "B": (0x00181, 0x00182, 0x00243, 0x0A796),
    "C": (0x00187, 0x0023B, 0x0A76E, 0x0A792, 0x0A73E),
    "E": (0x00246, 0x0A76A, 0x0A7AB),
    "F": (0x00191, 0x0A77B, 0x0A798),
    "G": (
        0x00193, 0x001E4, 0x0A77D, 0x0A77E, 0x0A7A0, 0x0A7AC, 0x0A7D0,
    ),
    "I": (0x00197, 0x0A7AE),
    "J": (0x00248,),
    "K": (0x00198, 0x02C69, 0x0A740, 0x0A742, 0x0A744, 0x0A7A2),
    "N": (0x0019D, 0x00220, 0x0A790, 0x0A7A4),
    "P": (0x001A4, 0x02C63, 0x0A750, 0x0A752, 0x0A754),
    "Q": (0x0024A, 0x0A756, 0x0A758),
    "R": (
        0x001A6, 0x0024C, 0x02C64, 0x0A75A, 0x0A75C, 0x0A776, 0x0A782, 0x0A7A6,
        0x0AB46,
    ),
    "U": (0x00244, 0x0A7B8),
    "V": (0x001B2, 0x0A75E, 0x0A768),
    "W": (0x001F7, 0x01EFC, 0x02C72, 0x0A7C2),
    "Y": (0x0024E, 0x01EFE),
    "Z": (0x001B5, 0x00224, 0x02C6B, 0x02C7F, 0x0A762),
    "b": (0x00180, 0x00183, 0x0A797),
    "c": (0x00188, 0x0023C, 0x0A73F, 0x0A76F, 0x0A793, 0x0A794),
    "e": (0x00247, 0x02C78, 0x0A76B, 0x0AB32, 0x0AB33, 0x0AB34),
    "f": (0x00192, 0x0A77C, 0x0A799, 0x0AB35),
    "g": (0x001E5, 0x0A77F, 0x0A7A1, 0x0A7D1, 0x0AB36),
    "j": (0x00237, 0x00249),
    "n": (0x0019E, 0x00235, 0x0A774, 0x0A791, 0x0A7A5, 0x0AB3B),
    "p": (0x001A5, 0x0A751, 0x0A753, 0x0A755),
    "q": (0x0024B, 0x0A757, 0x0A759),
    "r": (
        0x0024D, 0x0A75B, 0x0A75D, 0x0A775, 0x0A783, 0x0A7A7, 0x0AB47, 0x0AB49,
        0x0AB4B, 0x0AB4C,
    ),
    "w": (0x001BF, 0x01EFD, 0x02C73, 0x0A7C3, 0x0A7D5),
    "y": (0x0024F, 0x01EFF, 0x0AB5A),
    "z": (0x001B6, 0x00225, 0x00240, 0x02C6C, 0x0A763),
    "ZH": (0x001B7, 0x001EE),
    "GH": (0x0021C,),
    "zh": (0x001BA, 0x001EF),
    "gh": (0x0021D,),
    "'Y": (0x001B3,),
    "'y": (0x001B4,),
    "a": (0x01E9A, 0x02C65, 0x0AB30),
    "M": (0x02C6E,),
    "S": (
        0x02C7E, 0x0A76C, 0x0A784, 0x0A7A8, 0x0A7C9, 0x0A7CC, 0x0A7CD, 0x0A7D6,
        0x0A7D8,
    ),
    "m": (0x0A773, 0x0AB3A),
    "u": (0x0A7B9, 0x0AB4E, 0x0AB4F, 0x0AB52),
    "v": (0x02C71, 0x02C74, 0x0A75F, 0x0A769),
    "x": (0x0AB56, 0x0AB57, 0x0AB58, 0x0AB59),
    "LL": (0x0A746,),
    "VY": (0x0A760,),
    "ie": (0x0AB61,),
    "oe": (0x0AB62,),
    "ll": (0x0A747, 0x0A78E),
    "rr": (0x0AB48, 0x0AB4A),
    "th": (0x0A765, 0x0A767, 0x0A7D3),
    "ui": (0x0AB50, 0x0AB51),
    "uo": (0x0AB63,),
    "vy": (0x0A761,),
}


NUMERIC: Dict[str, Tuple[int, ...]] = {
    "0": (
        0x02070, 0x02080, 0x03007, 0x024EA, 0x024FF, 0x1D7CE, 0x1D7D8, 0x1D7E2,
        0x1D7EC, 0x1D7F6, 0x1F100, 0x1F101, 0x1F10B, 0x1F10C, 0x1FBF0, 0x0FF10,
    ),
    "1": (
        0x000B9, 0x02081, 0x02460, 0x02474, 0x02488, 0x024F5, 0x1D7CF, 0x1D7D9,
        0x1D7E3, 0x1D7ED, 0x1D7F7, 0x1F102, 0x1FBF1, 0x0FF11, 0x02776, 0x02780,
        0x0278A,
    ),
    "2": (
        0x000B2, 0x001A7, 0x001A8, 0x001BB, 0x02082, 0x02461, 0x02475, 0x02489,
        0x024F6, 0x1D7D0, 0x1D7DA, 0x1D7E4, 0x1D7EE, 0x1D7F8, 0x1F103, 0x1FBF2,
        0x0FF12, 0x02777, 0x02781, 0x0278B,
    ),
    "3": (
        0x000B3, 0x02083, 0x02462, 0x02476, 0x0248A, 0x024F7, 0x1D7D1, 0x1D7DB,
        0x1D7E5, 0x1D7EF, 0x1D7F9, 0x1F104, 0x1FBF3, 0x0A72A, 0x0A72B, 0x0FF13,
        0x02778, 0x02782, 0x0278C,
    ),
    "4": (
        0x02074, 0x02084, 0x02463, 0x02477, 0x0248B, 0x024F8, 0x1D7D2, 0x1D7DC,
        0x1D7E6, 0x1D7F0, 0x1D7FA, 0x1F105, 0x1FBF4, 0x0A72C, 0x0A72D, 0x0A72E,
        0x0A72F, 0x0FF14, 0x02779, 0x02783, 0x0278D,
    ),
    "5": (
        0x001BC, 0x001BD, 0x02075, 0x02085, 0x02464, 0x02478, 0x0248C, 0x024F9,
        0x1D7D3, 0x1D7DD, 0x1D7E7, 0x1D7F1, 0x1D7FB, 0x1F106, 0x1FBF5, 0x0FF15,
        0x0277A, 0x02784, 0x0278E,
    ),
    "6": (
        0x00184, 0x00185, 0x02076, 0x02086, 0x02465, 0x02479, 0x0248D, 0x024FA,
        0x1D7D4, 0x1D7DE, 0x1D7E8, 0x1D7F2, 0x1D7FC, 0x1F107, 0x1FBF6, 0x0FF16,
        0x0277B, 0x02785, 0x0278F,
    ),
    "7": (
        0x02077, 0x02087, 0x02466, 0x0247A, 0x0248E, 0x024FB, 0x1D7D5, 0x1D7DF,
        0x1D7E9, 0x1D7F3, 0x1D7FD, 0x1F108, 0x1FBF7, 0x0FF17, 0x0277C, 0x02786,
        0x02790,
    ),
    "8": (
        0x02078, 0x02088, 0x02467, 0x0247B, 0x0248F, 0x024FC, 0x1D7D6, 0x1D7E0,
        0x1D7EA, 0x1D7F4, 0x1D7FE, 0x1F109, 0x1FBF8, 0x0FF18, 0x0277D, 0x02787,
        0x02791,
    ),
    "9": (
        0x02079, 0x02089, 0x02468, 0x0247C, 0x02490, 0x024FD, 0x1D7D7, 0x1D7E1,
        0x1D7EB, 0x1D7F5, 0x1D7FF, 0x1F10A, 0x1FBF9, 0x0FF19, 0x0277E, 0x02788,
        0x02792,
    ),
    "10": (
        0x02469, 0x0247D, 0x02491, 0x024FE, 0x03248, 0x0277F, 0x02789, 0x02793,
    ),
    "11": (0x0246A, 0x0247E, 0x02492, 0x024EB),
    "12": (0x0246B, 0x0247F, 0x02493, 0x024EC),
    "13": (0x0246C, 0x02480, 0x02494, 0x024ED),
    "14": (0x0246D, 0x02481, 0x02495, 0x024EE),
    "15": (0x0246E, 0x02482, 0x02496, 0x024EF),
    "16": (0x0246F, 0x02483, 0x02497, 0x024F0),
    "17": (0x02470, 0x02484, 0x02498, 0x024F1),
    "18": (0x02471, 0x02485, 0x02499, 0x024F2),
    "19": (0x02472, 0x02486, 0x0249A, 0x024F3),
    "20": (0x02473, 0x02487, 0x0249B, 0x024F4, 0x03249),
    "21": (0x03251,),
    "22": (0x03252,),
    "23": (0x03253,),
    "24": (0x03254,),
    "25": (0x03255,),
    "26": (0x03256,),
    "27": (0x03257,),
    "28": (0x03258,),
    "29": (0x03259,),
    "30": (0x0324A, 0x0325A),
    "31": (0x0325B,),
    "32": (0x0325C,),
    "33": (0x0325D,),
    "34": (0x0325E,),
    "35": (0x0325F,),
    "36": (0x032B1,),
    "37": (0x032B2,),
    "38": (0x032B3,),
    "39": (0x032B4,),
    "40": (0x0324B, 0x032B5),
    "41": (0x032B6,),
    "42": (0x032B7,),
    "43": (0x032B8,),
    "44": (0x032B9,),
    "45": (0x032BA,),
    "46": (0x032BB,),
    "47": (0x032BC,),
    "48": (0x032BD,),
    "49": (0x032BE,),
    "50": (0x0324C, 0x032BF),
    "60": (0x0324D,),
    "70": (0x0324E,),
    "80": (0x0324F,),
}


# The Ogham space mark is a deliberate exception to locale invariance.
SPACING: Dict[str, Tuple[int, ...]] = {
    "": (0x0000D, 0x0200B, 0x0200C, 0x0200D, 0x0FEFF),
    "\n": (
        0x0000A, 0x0000B, 0x0000C, 0x00085, 0x02028, 0x02029, 0x02424,
    ),
    " ": (
        0x00009, 0x000A0, 0x02000, 0x02001, 0x02002, 0x02003, 0x02004, 0x02005,
        0x02006, 0x02007, 0x02008, 0x02009, 0x0200A, 0x0202F, 0x0205F, 0x02060,
        0x03000, 0x01680, 0x0237D, 0x02420, 0x02422, 0x02423,
    ),
}


# Fullwidth forms used for CJK/Arabic alignment fold to halfwidth ASCII.
ALIGNMENT: Dict[str, Tuple[int, ...]] = {
    "F": (0x0A730, 0x0FF26),
    "I": (0x0A7FE, 0x0FF29),
    "M": (0x0A7FF, 0x0FF2D),
    "S": (0x0A731, 0x0FF33),
    "A": (0x0FF21,),
    "B": (0x0FF22,),
    "C": (0x0FF23,),
    "D": (0x0FF24,),
    "E": (0x0FF25,),
    "G": (0x0FF27,),
    "H": (0x0FF28,),
    "J": (0x0FF2A,),
    "K": (0x0FF2B,),
    "L": (0x0FF2C,),
    "N": (0x0FF2E,),
    "O": (0x0FF2F,),
    "P": (0x0FF30,),
    "Q": (0x0FF31,),
    "R": (0x0FF32,),
    "T": (0x0FF34,),
    "U": (0x0FF35,),
    "V": (0x0FF36,),
    "W": (0x0FF37,),
    "X": (0x0FF38,),
    "Y": (0x0FF39,),
    "Z": (0x0FF3A,),
    "a": (0x0FF41,),
    "b": (0x0FF42,),
    "c": (0x0FF43,),
    "d": (0x0FF44,),
    "e": (0x0FF45,),
    "f": (0x0FF46,),
    "g": (0x0FF47,),
    "h": (0x0FF48,),
    "i": (0x0FF49,),
    "j": (0x0FF4A,),
    "k": (0x0FF4B,),
    "l": (0x0FF4C,),
    "m": (0x0FF4D,),
    "n": (0x0FF4E,),
    "o": (0x0FF4F,),
    "p": (0x0FF50,),
    "q": (0x0FF51,),
    "r": (0x0FF52,),
    "s": (0x0FF53,),
    "t": (0x0FF54,),
    "u": (0x0FF55,),
    "v": (0x0FF56,),
    "w": (0x0FF57,),
    "x": (0x0FF58,),
    "y": (0x0FF59,),
    "z": (0x0FF5A,),
    "'": (0x0FF40,),
}


# Inverted question/exclamation marks have no ASCII counterpart and are dropped.
PUNCTUATION: Dict[str, Tuple[int, ...]] = {
    "": (0x000A1, 0x000BF),
    "'": (
        0x00060, 0x000B4, 0x02018, 0x02019, 0x0201A, 0x0201B, 0x02032, 0x02035,
        0x0A78B, 0x0A78C, 0x0FF07, 0x0275B, 0x0275C, 0x0275F,
    ),
    "-": (
        0x000AD, 0x02010, 0x02011, 0x02012, 0x02013, 0x02014, 0x02015, 0x02043,
        0x0204C, 0x0204D, 0x0207B, 0x0208A, 0x0208B, 0x02212, 0x02296, 0x0229D,
        0x0229F, 0x02A3A, 0x01428, 0x0FF0D, 0x023AF, 0x02796, 0x0FE58, 0x0FE63,
    ),
    "_": (
        0x000AF, 0x02017, 0x0203E, 0x0203F, 0x02040, 0x02050, 0x02054, 0x0FF3F,
    ),
    "!": (
        0x001C3, 0x0FF01, 0x02755, 0x02757, 0x02E53, 0x0FE15, 0x0FE57,
    ),
    "x": (0x02297, 0x022A0, 0x02A02, 0x02A36, 0x02A37),
    "#": (0x02114, 0x0FF03, 0x0FE5F),
    "=": (0x0229C, 0x030A0, 0x0FF1D, 0x02E40, 0x0FE66),
    "*": (
        0x0204E, 0x02217, 0x0229B, 0x029C6, 0x0FF0A, 0x02731, 0x0FE61,
    ),
    "+": (
        0x0207A, 0x02295, 0x0229E, 0x02A01, 0x02A39, 0x01429, 0x0FF0B, 0x02795,
        0x0FE62,
    ),
    ":": (0x02236, 0x00703, 0x0FF1A, 0x0FE13, 0x0FE55),
    ";": (0x0204F, 0x0061B, 0x0FF1B, 0x0FE14),
    "/": (
        0x02044, 0x02215, 0x02216, 0x02298, 0x029C4, 0x029F8, 0x1F67C, 0x0FF0F,
    ),
    "\\": (0x029B8, 0x029C5, 0x029F5, 0x029F9, 0x1F67D, 0x0FF3C),
    '"': (
        0x0201C, 0x0201D, 0x0201E, 0x0201F, 0x0301D, 0x0301E, 0x0301F, 0x0FF02,
        0x0275D, 0x0275E, 0x02760,
    ),
    "&": (
        0x1F670, 0x1F671, 0x1F672, 0x1F673, 0x1F674, 0x1F675, 0x0FF06, 0x0FE60,
    ),
    "~": (0x002DC, 0x0223C, 0x0223D, 0x0FF5E),
    "\u00b7": (
        0x02022, 0x02023, 0x02027, 0x02219, 0x02299, 0x022A1, 0x025E6, 0x029BE,
        0x029BF, 0x02A00, 0x01427, 0x030FB, 0x0FF65, 0x10101, 0x1091F, 0x10A50,
        0x10AF4, 0x11049, 0x02E31,
    ),
    "\u00f7": (0x029BC, 0x02A38, 0x02E13, 0x02797),
    ".": (0x02024, 0x0FF0E, 0x02396),
    "..": (0x02025, 0x00705),
    "...": (0x02026, 0x022EF),
    "''": (0x02033, 0x02036),
    "'''": (0x02034, 0x02037),
    "!!": (0x0203C,),
    "?!": (0x0203D, 0x02048),
    "??": (0x02047,),
    "!?": (0x02049,),
    ":=": (0x02254,),
    "::==": (0x02A74,),
    "=:": (0x02255,),
    "==": (0x02A75,),
    "===": (0x02A76,),
    "++": (0x029FA,),
    "+++": (0x029FB,),
    "?": (
        0x1FBC4, 0x0FF1F, 0x02753, 0x02754, 0x02E54, 0x0FE16, 0x0FE56,
    ),
    ",": (0x0066B, 0x0FF0C, 0x0FF64, 0x0FE50, 0x0FE68),
    "@": (0x0FF20, 0x0FE6B),
    "....": (0x01801,),
}


# Printable ASCII minus the grave accent, which folds to an apostrophe.
PLAIN_ASCII: FrozenSet[int] = frozenset(range(0x00020, 0x0007F)) - {0x00060}

CATEGORY_TABLES: Tuple[Tuple[Category, Dict[str, Tuple[int, ...]]], ...] = (
    (Category.NON_GLYPH, NON_GLYPH),
    (Category.DIACRITIC, DIACRITIC),
    (Category.LIGATURE, LIGATURE),
    (Category.SUPER_SUBSCRIPT, SUPER_SUBSCRIPT),
    (Category.ITEMIZED, ITEMIZED),
    (Category.ADOPTED, ADOPTED),
    (Category.NUMERIC, NUMERIC),
    (Category.SPACING, SPACING),
    (Category.ALIGNMENT, ALIGNMENT),
    (Category.PUNCTUATION, PUNCTUATION),
)
