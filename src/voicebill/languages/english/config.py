"""
英文帳單配置模組

集中管理英文（含印度英語口音）語音輸入的數字詞、單位、價格關鍵字與 ASR 誤聽規則。
"""


class EnglishBillingConfig:
    """英文帳單配置類別 - 集中管理英文數字詞與關鍵字表"""

    # 口語數字 -> 阿拉伯數字
    # 包含常見的 ASR 誤聽 (例如 "won" -> 1, "too" -> 2)
    # 多字詞 ("twenty five") 由 normalizer 以長度降序優先比對
    NUMBER_WORDS = {
        'one': '1', 'won': '1', 'wan': '1',
        'two': '2', 'to': '2', 'too': '2', 'tu': '2',
        'three': '3', 'tree': '3', 'free': '3',
        'four': '4', 'for': '4', 'fore': '4', 'foor': '4',
        'five': '5', 'fife': '5',
        'six': '6', 'sex': '6', 'sicks': '6',
        'seven': '7', 'sevan': '7',
        'eight': '8', 'ate': '8', 'eit': '8',
        'nine': '9', 'nein': '9',
        'ten': '10', 'tan': '10',
        'eleven': '11', 'levan': '11',
        'twelve': '12', 'twelf': '12',
        'thirteen': '13',
        'fourteen': '14',
        'fifteen': '15', 'fiftin': '15',
        'sixteen': '16',
        'seventeen': '17',
        'eighteen': '18',
        'nineteen': '19',
        'twenty': '20', 'tweny': '20', 'twenti': '20',
        'twenty five': '25', 'twentyfive': '25',
        'thirty': '30', 'thirdy': '30',
        'forty': '40', 'fourty': '40', 'fourtie': '40',
        'fifty': '50', 'fiftie': '50',
        'sixty': '60',
        'seventy': '70',
        'eighty': '80',
        'ninety': '90',
        'hundred': '100', 'hundrad': '100',
        'two hundred': '200', 'three hundred': '300', 'five hundred': '500',
        'thousand': '1000',
        'half': '0.5', 'haf': '0.5',
        'quarter': '0.25', 'quater': '0.25',
        'one and half': '1.5', 'one half': '1.5',
    }

    # 數量單位 (重量 / 容量 / 計數)
    QUANTITY_KEYWORDS = [
        # 重量
        'kilogram', 'kilograms', 'kilo', 'kilos', 'kgs', 'kg',
        'gram', 'grams', 'gms', 'gm', 'g',
        # 容量
        'liters', 'liter', 'litre', 'litres', 'ltr', 'l',
        'milliliters', 'milliliter', 'milli', 'ml',
        # 計數 / 包裝
        'packets', 'packet', 'pkt', 'pack', 'packs',
        'bundle', 'bundles', 'bunch', 'bunches',
        'boxes', 'box',
        'pieces', 'piece', 'pcs', 'pc',
        'nos', 'number', 'numbers', 'count',
        'dozen', 'dozens', 'doz',
        'unit', 'units',
    ]

    # 價格關鍵字 (含常見誤聽拼法)
    RATE_KEYWORDS = [
        'rupees', 'rupee', 'rupay', 'rupaya', 'roopees', 'rupies',
        'rs', 'r', 'inr', '₹',
        'bucks', 'price',
    ]

    # 數字之後的價格詞誤聽 -> 標準寫法
    # 例: "50 are" 其實是 "50 rs"
    RATE_CORRECTIONS = {
        'rupee': 'rupees',
        'rupe': 'rupees',
        'rupay': 'rupees',
        'rupaya': 'rupees',
        'roopees': 'rupees',
        'rupies': 'rupees',
        'rupi': 'rupees',
        'rupess': 'rupees',
        'rs': 'rupees',
        'are': 'rupees',
        'ars': 'rupees',
    }

    # 泰米爾語句中常見的英文借詞，formalizer 原樣保留
    PRESERVED_WORDS = [
        'kg', 'g', 'ml', 'l', 'ltr',
        'packet', 'pack', 'box', 'dozen',
        'chicken', 'mutton', 'fish',
        'rice', 'oil', 'sugar', 'salt',
        'tomato', 'potato', 'onion', 'carrot',
        'apple', 'orange', 'banana', 'mango',
        'milk', 'curd', 'butter', 'cheese', 'paneer',
        'rs', 'rupees', 'rupee', 'inr',
    ]

    # 用於品項切分的英文品名
    ITEM_NAMES = [
        'tomato', 'onion', 'potato', 'carrot', 'beans', 'milk', 'rice', 'egg', 'eggs',
        'chicken', 'mutton', 'fish', 'oil', 'sugar', 'salt', 'apple', 'banana', 'orange',
        'curd', 'butter', 'cheese', 'paneer', 'bread', 'atta', 'maida', 'dal',
    ]
