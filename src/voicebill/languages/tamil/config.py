"""
泰米爾語配置模組

集中管理泰米爾語的數字詞、單位、口語→書面語 (diglossia) 映射、
雜貨領域詞庫以及 ASR 誤聽修正表。

所有表格都是靜態資料，由 `voicebill.core.lexicon.Lexicon` 在啟動時組裝一次。
"""


class TamilLinguisticConfig:
    """泰米爾語配置類別 - 集中管理泰米爾語規則與詞表"""

    # =========================================================================
    # 1. Unicode 區段與字元分類
    # =========================================================================
    UNICODE_START = 0x0B80
    UNICODE_END = 0x0BFF

    # Uyir (獨立母音)
    UYIR_VOWELS = frozenset(['அ', 'ஆ', 'இ', 'ஈ', 'உ', 'ஊ', 'எ', 'ஏ', 'ஐ', 'ஒ', 'ஓ', 'ஔ'])

    # Mei (子音 + pulli)，不可出現在詞首
    MEI_CONSONANTS = frozenset([
        'க்', 'ங்', 'ச்', 'ஞ்', 'ட்', 'ண்', 'த்', 'ந்', 'ப்', 'ம்',
        'ய்', 'ர்', 'ல்', 'வ்', 'ழ்', 'ள்', 'ற்', 'ன்',
    ])

    # pulli (virama)，mei 的第二個 code point
    PULLI = '்'

    # =========================================================================
    # 2. 數字詞 (含口語與 ASR 變體)
    # =========================================================================
    NUMBER_WORDS = {
        # 基本數字
        'ஒன்று': '1', 'ஒன்னு': '1', 'ஒரு': '1', 'ஒண்ணு': '1', 'ஒன்': '1', 'ஓன்னு': '1',
        'இரண்டு': '2', 'ரெண்டு': '2', 'இரெண்டு': '2', 'ரண்டு': '2', 'ரெண்ட': '2',
        'மூன்று': '3', 'மூணு': '3', 'மூன்': '3', 'மூன்ன': '3',
        'நான்கு': '4', 'நாலு': '4', 'நாங்கு': '4', 'நான்': '4', 'நால': '4',
        'ஐந்து': '5', 'அஞ்சு': '5', 'ஐந்': '5', 'ஐஞ்சு': '5',
        'ஆறு': '6', 'ஆற': '6', 'ஆறா': '6',
        'ஏழு': '7', 'ஏழ': '7', 'ஏழா': '7',
        'எட்டு': '8', 'எட்': '8', 'எட்ட': '8',
        'ஒன்பது': '9', 'ஒம்பது': '9', 'ஒன்ப': '9', 'ஒம்போது': '9',
        'பத்து': '10', 'பத்': '10', 'பத்தா': '10',
        # 11-19
        'பதினொன்று': '11', 'பதினோரு': '11', 'பதினொண்ணு': '11',
        'பன்னிரண்டு': '12', 'பன்னெண்டு': '12', 'பனிரெண்டு': '12',
        'பதிமூன்று': '13', 'பதின்மூன்று': '13',
        'பதினான்கு': '14', 'பதினாலு': '14',
        'பதினைந்து': '15', 'பதினஞ்சு': '15',
        'பதினாறு': '16',
        'பதினேழு': '17',
        'பதினெட்டு': '18',
        'பத்தொன்பது': '19', 'பத்தொம்பது': '19',
        # 十位數
        'இருபது': '20', 'இருவது': '20', 'ருபது': '20',
        'இருபத்தைந்து': '25', 'இருபத்தஞ்சு': '25',
        'முப்பது': '30', 'மூப்பது': '30',
        'நாற்பது': '40', 'நாப்பது': '40',
        'ஐம்பது': '50', 'ஐம்பத்': '50',
        'அறுபது': '60',
        'எழுபது': '70',
        'எண்பது': '80',
        'தொண்ணூறு': '90',
        'நூறு': '100', 'நூத்': '100',
        # 百位數以上
        'இருநூறு': '200', 'முந்நூறு': '300', 'நானூறு': '400', 'ஐந்நூறு': '500',
        'அறுநூறு': '600', 'எழுநூறு': '700', 'எண்ணூறு': '800', 'தொள்ளாயிரம்': '900',
        'ஆயிரம்': '1000',
        # 分數 (雜貨常用)
        'அரை': '0.5', 'அரைக்': '0.5',
        'கால்': '0.25', 'காலு': '0.25',
        'முக்கால்': '0.75',
        'ஒன்னரை': '1.5', 'ஒண்ணரை': '1.5',
    }

    # 分數詞 + 單位直接黏在一起時的備援規則 (例: "அரைகிலோ")
    # 順序：長詞優先，避免 "கால்" 吃掉 "முக்கால்"
    FRACTION_WORDS = {
        'முக்கால்': 0.75,
        'அரை': 0.5,
        'கால்': 0.25,
    }
    FRACTION_UNITS = ['கிலோ', 'லிட்டர்', 'kg', 'l']

    # =========================================================================
    # 3. 單位與價格關鍵字
    # =========================================================================
    QUANTITY_KEYWORDS = [
        # 重量
        'கிலோ', 'கிலோகிராம்', 'கி.கி', 'கி',
        'கிராம்', 'கிரா',
        # 容量
        'லிட்டர்', 'லி',
        'மில்லி', 'மி.லி',
        # 計數 / 包裝
        'பாக்கெட்', 'பாக்', 'பேக்',
        'கட்டு', 'கட்டுகள்',
        'எண்ணிக்கை', 'பீஸ்', 'பிஸ்',
        'டஜன்',
        'மூட்டை',
        'பெட்டி',
    ]

    RATE_KEYWORDS = ['ரூபாய்', 'ரூபா', 'ரூ', 'விலை', 'ரூபாய்க்கு', 'ரூபை']

    RATE_CORRECTIONS = {
        'ரூபா': 'ரூபாய்',
        'ருபாய்': 'ரூபாய்',
        'ருபா': 'ரூபாய்',
    }

    # =========================================================================
    # 4. ASR 整詞修正 (exact-match，只替換完整 token)
    # =========================================================================
    ASR_CORRECTIONS = {
        'தக்காள': 'தக்காளி',
        'வெங்கயம்': 'வெங்காயம்',
        'வெங்காயம': 'வெங்காயம்',
        'உருளக்கிழங்கு': 'உருளைக்கிழங்கு',
        'உருளகிழங்கு': 'உருளைக்கிழங்கு',
        'கத்தரிக்காய்': 'கத்திரிக்காய்',
        'கத்தரி': 'கத்திரிக்காய்',
        'முருங்கை': 'முருங்கைக்காய்',
        'கிலோகிராம்': 'கிலோ',
        'கிலோகிரா': 'கிலோ',
        'லிட்டரு': 'லிட்டர்',
    }

    # =========================================================================
    # 5. Diglossia：口語 -> 書面語
    # =========================================================================
    COLLOQUIAL_TO_FORMAL = {
        # 蔬菜
        'தக்காளி': 'தக்காளி',
        'தக்காள': 'தக்காளி',
        'வெங்காயம்': 'வெங்காயம்',
        'வெங்காளம்': 'வெங்காயம்',
        'வெங்கயம்': 'வெங்காயம்',
        'உருளை': 'உருளைக்கிழங்கு',
        'உருளக்கிழங்கு': 'உருளைக்கிழங்கு',
        'கத்திரி': 'கத்திரிக்காய்',
        'கத்தரிக்காய்': 'கத்திரிக்காய்',
        'பீன்ஸ்': 'பீன்ஸ்',
        'பீன்ஸ்காய்': 'பீன்ஸ்',
        'பரங்கி': 'பரங்கிக்காய்',
        'சேனை': 'சேனைக்கிழங்கு',
        'கேரட்': 'கேரட்',
        'காரட்': 'கேரட்',
        'பீட்ரூட்': 'பீட்ரூட்',
        'முள்ளங்கி': 'முள்ளங்கி',
        'முல்லங்கி': 'முள்ளங்கி',

        # 穀物與豆類
        'அரிசி': 'அரிசி',
        'அரிச': 'அரிசி',
        'பருப்பு': 'பருப்பு',
        'பருப்ப': 'பருப்பு',
        'துவரம்': 'துவரம் பருப்பு',
        'துவர': 'துவரம் பருப்பு',
        'உளுந்து': 'உளுந்து',
        'உளுத்தம்': 'உளுத்தம் பருப்பு',
        'கடலை': 'கடலைப்பருப்பு',
        'பாசிப்பருப்பு': 'பாசிப்பருப்பு',
        'பாசி': 'பாசிப்பருப்பு',

        # 水果
        'வாழைப்பழம்': 'வாழைப்பழம்',
        'வாழப்பழம்': 'வாழைப்பழம்',
        'ஆப்பிள்': 'ஆப்பிள்',
        'ஆப்பள்': 'ஆப்பிள்',
        'ஆரஞ்சு': 'ஆரஞ்சு',
        'ஆரஞ்ச': 'ஆரஞ்சு',
        'திராட்சை': 'திராட்சை',
        'திராச்சை': 'திராட்சை',
        'மாம்பழம்': 'மாம்பழம்',
        'மாங்கா': 'மாங்காய்',
        'பப்பாளி': 'பப்பாளி',
        'பப்பாய': 'பப்பாளி',

        # 香料與調味
        'மிளகாய்': 'மிளகாய்',
        'மிளகா': 'மிளகாய்',
        'மிளகு': 'மிளகு',
        'மல்லி': 'மல்லி',
        'கொத்தமல்லி': 'கொத்தமல்லி',
        'கொத்துமல்லி': 'கொத்தமல்லி',
        'புதினா': 'புதினா',
        'புதின': 'புதினா',
        'கறிவேப்பிலை': 'கறிவேப்பிலை',
        'கறிவேப்ல': 'கறிவேப்பிலை',
        'இஞ்சி': 'இஞ்சி',
        'இஞ்ச': 'இஞ்சி',
        'பூண்டு': 'பூண்டு',
        'பூண்ட': 'பூண்டு',
        'எண்ணெய்': 'எண்ணெய்',
        'எண்ணை': 'எண்ணெய்',
        'உப்பு': 'உப்பு',
        'சர்க்கரை': 'சர்க்கரை',
        'சக்கர': 'சர்க்கரை',

        # 乳製品與蛋
        'பால்': 'பால்',
        'முட்டை': 'முட்டை',
        'முட்ட': 'முட்டை',
        'தயிர்': 'தயிர்',
        'தயிரு': 'தயிர்',
        'நெய்': 'நெய்',
        'வெண்ணெய்': 'வெண்ணெய்',
        'வெண்ணை': 'வெண்ணெய்',
        'பன்னீர்': 'பன்னீர்',
        'பனீர்': 'பன்னீர்',

        # 肉類
        'கோழி': 'கோழி இறைச்சி',
        'சிக்கன்': 'கோழி இறைச்சி',
        'மட்டன்': 'ஆட்டு இறைச்சி',
        'மீன்': 'மீன்',

        # 單位
        'கிலோ': 'கிலோகிராம்',
        'கிலா': 'கிலோகிராம்',
        'கேஜி': 'கிலோகிராம்',
        'கிராம்': 'கிராம்',
        'கிரா': 'கிராம்',
        'லிட்டர்': 'லிட்டர்',
        'லிட்டரு': 'லிட்டர்',
        'பாக்கெட்': 'பாக்கெட்',
        'பாக்கட்': 'பாக்கெட்',
        'பாக்': 'பாக்கெட்',

        # 貨幣
        'ருபாய்': 'ரூபாய்',
        'ருபா': 'ரூபாய்',
        'ருவா': 'ரூபாய்',
        'ரூபை': 'ரூபாய்',
        'ரூ': 'ரூபாய்',
    }

    # =========================================================================
    # 6. 雜貨詞庫 (模糊修正的比對目標，宣告順序即 tie-break 順序)
    # =========================================================================
    GROCERY_LEXICON = [
        # 蔬菜
        'தக்காளி', 'வெங்காயம்', 'உருளைக்கிழங்கு', 'கத்திரிக்காய்', 'முருங்கைக்காய்',
        'பாகற்காய்', 'புடலங்காய்', 'சுரைக்காய்', 'பீர்க்கங்காய்', 'வெண்டைக்காய்',
        'அவரைக்காய்', 'பீன்ஸ்', 'பட்டாணி', 'முட்டைகோஸ்', 'காலிஃப்ளவர்',
        'கேரட்', 'பீட்ரூட்', 'முள்ளங்கி', 'வாழைத்தண்டு', 'வாழைப்பூ',
        'காய்கறி', 'கீரை', 'பசலைக்கீரை', 'முருங்கைக்கீரை', 'அரைக்கீரை',
        'மணத்தக்காளி', 'பொன்னாங்கண்ணி', 'வெந்தயக்கீரை', 'கொத்தமல்லி', 'புதினா',
        'கறிவேப்பிலை', 'பூசணிக்காய்', 'சௌசௌ', 'குடைமிளகாய்', 'பச்சைமிளகாய்',
        'தேங்காய்', 'இஞ்சி', 'பூண்டு', 'சின்ன வெங்காயம்', 'பெரிய வெங்காயம்',
        'பரங்கிக்காய்', 'சேனைக்கிழங்கு', 'மல்லி',

        # 穀物與豆類
        'அரிசி', 'புழுங்கல் அரிசி', 'பாசுமதி அரிசி', 'பொன்னி அரிசி',
        'கோதுமை', 'ரவை', 'மைதா', 'சோளம்', 'கம்பு', 'ராகி', 'கேழ்வரகு',
        'பருப்பு', 'துவரம் பருப்பு', 'கடலைப்பருப்பு', 'உளுத்தம் பருப்பு',
        'பாசிப்பருப்பு', 'மசூர் பருப்பு', 'கொண்டக்கடலை', 'ராஜ்மா',
        'உளுந்து', 'பயறு', 'மொச்சை', 'சுண்டல்',

        # 水果
        'வாழைப்பழம்', 'ஆப்பிள்', 'ஆரஞ்சு', 'திராட்சை', 'மாம்பழம்',
        'மாங்காய்', 'பப்பாளி', 'கொய்யா', 'சப்போட்டா', 'பலாப்பழம்',
        'அன்னாசி', 'தர்பூசணி', 'முலாம்பழம்', 'பேரிக்காய்', 'மாதுளை',
        'எலுமிச்சை', 'சாத்துக்குடி', 'நாரத்தை', 'நெல்லிக்காய்',

        # 乳製品
        'பால்', 'தயிர்', 'மோர்', 'நெய்', 'வெண்ணெய்', 'பன்னீர்', 'சீஸ்',

        # 香料與調味
        'மிளகு', 'மிளகாய்', 'மஞ்சள்', 'சீரகம்', 'கடுகு', 'வெந்தயம்',
        'சோம்பு', 'ஏலக்காய்', 'பட்டை', 'கிராம்பு', 'ஜாதிக்காய்',
        'உப்பு', 'சர்க்கரை', 'வெல்லம்', 'தேன்', 'எண்ணெய்',
        'நல்லெண்ணெய்', 'தேங்காய் எண்ணெய்', 'கடலை எண்ணெய்',

        # 蛋與肉
        'முட்டை', 'கோழி இறைச்சி', 'ஆட்டு இறைச்சி', 'மீன்',

        # 單位與貨幣
        'ரூபாய்', 'கிலோகிராம்', 'கிராம்', 'லிட்டர்', 'மில்லி லிட்டர்',
        'பாக்கெட்', 'கட்டு', 'டஜன்', 'பெட்டி', 'மூட்டை',
    ]

    # =========================================================================
    # 7. 用於品項切分的泰米爾品名
    # =========================================================================
    ITEM_NAMES = [
        # 蔬菜
        'தக்காளி', 'வெங்காயம்', 'உருளைக்கிழங்கு', 'உருளை', 'கத்திரிக்காய்', 'கத்திரி',
        'முருங்கைக்காய்', 'பாகற்காய்', 'புடலங்காய்', 'சுரைக்காய்', 'வெண்டைக்காய்',
        'பீன்ஸ்', 'கேரட்', 'பீட்ரூட்', 'முள்ளங்கி', 'கீரை', 'கொத்தமல்லி', 'புதினா',
        'பூசணிக்காய்', 'மிளகாய்', 'பச்சை மிளகாய்', 'இஞ்சி', 'பூண்டு', 'தேங்காய்',
        'முட்டைகோஸ்', 'காலிஃப்ளவர்', 'குடைமிளகாய்', 'சௌசௌ', 'அவரைக்காய்',
        'பட்டாணி', 'சின்ன வெங்காயம்', 'பெரிய வெங்காயம்', 'வாழைத்தண்டு',
        # 穀物
        'அரிசி', 'பருப்பு', 'கோதுமை', 'ரவை', 'மைதா', 'துவரம் பருப்பு',
        'உளுந்து', 'கடலை பருப்பு', 'பாசிப்பருப்பு', 'கம்பு', 'ராகி',
        # 水果
        'வாழைப்பழம்', 'ஆப்பிள்', 'ஆரஞ்சு', 'திராட்சை', 'மாம்பழம்', 'மாங்காய்',
        'பப்பாளி', 'கொய்யா', 'தர்பூசணி', 'பேரிக்காய்', 'மாதுளை', 'சப்போட்டா',
        # 乳製品
        'பால்', 'தயிர்', 'மோர்', 'நெய்', 'வெண்ணெய்', 'பன்னீர்', 'சீஸ்',
        # 蛋與肉
        'முட்டை', 'மீன்', 'கோழி', 'சிக்கன்', 'மட்டன்', 'இறால்',
        # 香料與油
        'எண்ணெய்', 'நல்லெண்ணெய்', 'தேங்காய் எண்ணெய்', 'உப்பு', 'சர்க்கரை',
        'மிளகு', 'மஞ்சள்', 'சீரகம்', 'கடுகு', 'வெந்தயம்',
    ]
