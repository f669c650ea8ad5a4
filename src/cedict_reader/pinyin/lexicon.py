"""Closed set of legal base Mandarin pinyin sounds.

Sounds are lowercase ASCII without tone digits. ``ü`` is spelled ``v`` the way
the line parser rewrites CC-CEDICT's ``u:``. Interjection sounds that CC-CEDICT
records with a tone (``m``, ``n``, ``ng``, ``hm``, ``hng``) and the rhotic
suffix ``r`` are included.
"""

from __future__ import annotations

from dataclasses import dataclass, field

_SOUNDS_BY_INITIAL = {
    "": "a o e ai ei ao ou an en ang eng er",
    "y": "yi ya yo ye yao you yan yin yang ying yong yu yue yuan yun",
    "w": "wu wa wo wai wei wan wen wang weng wong",
    "b": "ba bo bai bei bao ban ben bang beng bong bi bie biao bian biang bin bing bu",
    "p": "pa po pai pei pao pou pan pen pang peng pi pie piao pian pin ping pu",
    "m": "m ma mo me mai mei mao mou man men mang meng mi mie miao miu mian min ming mu",
    "f": "fa fo fei fou fan fen fang feng fiao fu",
    "d": (
        "da de dai dei dao dou dan den dang deng dong di dia die diao diu dian din ding"
        " du duo dui duan dun"
    ),
    "t": "ta te tai tei tao tou tan tang teng tong ti tie tiao tian ting tu tuo tui tuan tun",
    "n": (
        "n ng na ne nai nei nao nou nan nen nang neng nong ni nia nie niao niu nian nin"
        " niang ning nu nuo nuan nun nv nve"
    ),
    "l": (
        "la lo le lai lei lao lou lan len lang leng long li lia lie liao liu lian lin"
        " liang ling lu luo luan lun lv lve"
    ),
    "g": "ga ge gai gei gao gou gan gen gang geng gong gu gua guo guai gui guan gun guang",
    "k": "ka ke kai kei kao kou kan ken kang keng kong ku kua kuo kuai kui kuan kun kuang",
    "h": (
        "hm hng ha he hai hei hao hou han hen hang heng hong hu hua huo huai hui huan"
        " hun huang"
    ),
    "j": "ji jia jie jiao jiu jian jin jiang jing jiong ju jue juan jun",
    "q": "qi qia qie qiao qiu qian qin qiang qing qiong qu que quan qun",
    "x": "xi xia xie xiao xiu xian xin xiang xing xiong xu xue xuan xun",
    "zh": (
        "zhi zha zhe zhai zhei zhao zhou zhan zhen zhang zheng zhong zhu zhua zhuo"
        " zhuai zhui zhuan zhun zhuang"
    ),
    "ch": (
        "chi cha che chai chao chou chan chen chang cheng chong chu chua chuo chuai"
        " chui chuan chun chuang"
    ),
    "sh": (
        "shi sha she shai shei shao shou shan shen shang sheng shu shua shuo shuai"
        " shui shuan shun shuang"
    ),
    "r": "r ri re rao rou ran ren rang reng rong ru rua ruo rui ruan run",
    "z": "zi za ze zai zei zao zou zan zen zang zeng zong zu zuo zui zuan zun",
    "c": "ci ca ce cai cei cao cou can cen cang ceng cong cu cuo cui cuan cun",
    "s": "si sa se sai sao sou san sen sang seng song su suo sui suan sun",
}

PINYIN_SOUNDS: frozenset[str] = frozenset(
    sound for group in _SOUNDS_BY_INITIAL.values() for sound in group.split()
)


@dataclass(frozen=True)
class PinyinLexicon:
    """Read-only membership view over legal pinyin sounds.

    Instances are immutable and may be shared freely between threads.
    """

    sounds: frozenset[str] = field(default=PINYIN_SOUNDS)

    def contains(self, sound: str) -> bool:
        """Return whether ``sound`` (case-insensitive, no tone) is legal."""

        return sound.lower() in self.sounds

    def __contains__(self, sound: object) -> bool:
        return isinstance(sound, str) and self.contains(sound)

    def __len__(self) -> int:
        return len(self.sounds)
