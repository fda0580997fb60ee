# autocenter/models/catalog.py
from typing import List

from pydantic import BaseModel

from autocenter.models.common import normalize_language


class ServiceItem(BaseModel):
    id: str
    title_ar: str
    title_en: str
    desc_ar: str
    desc_en: str
    icon: str

    def localized(self, lang: str) -> dict:
        ar = normalize_language(lang) == "ar"
        return {
            "id": self.id,
            "title": self.title_ar if ar else self.title_en,
            "description": self.desc_ar if ar else self.desc_en,
            "icon": self.icon,
        }


SERVICES: List[ServiceItem] = [
    ServiceItem(id="diagnostics", icon="cpu",
                title_ar="فحص كمبيوتر شامل", title_en="Computer Diagnostics",
                desc_ar="قراءة الأعطال وتحليل أنظمة المحرك بأحدث الأجهزة.",
                desc_en="Fault code reading and full engine system analysis."),
    ServiceItem(id="engine", icon="wrench",
                title_ar="صيانة المحركات", title_en="Engine Repair",
                desc_ar="إصلاح وتوضيب المحركات بجميع أنواعها.",
                desc_en="Repair and overhaul for every engine type."),
    ServiceItem(id="oil", icon="droplet",
                title_ar="تغيير الزيت والفلاتر", title_en="Oil & Filter Change",
                desc_ar="زيوت أصلية وفلاتر معتمدة لعمر أطول للمحرك.",
                desc_en="Genuine oils and certified filters."),
    ServiceItem(id="brakes", icon="disc",
                title_ar="الفرامل والتعليق", title_en="Brakes & Suspension",
                desc_ar="فحص وإصلاح الفرامل ونظام التعليق.",
                desc_en="Inspection and repair of brakes and suspension."),
    ServiceItem(id="ac", icon="snowflake",
                title_ar="صيانة التكييف", title_en="A/C Service",
                desc_ar="تعبئة الغاز وإصلاح أنظمة التكييف.",
                desc_en="Refrigerant recharge and A/C system repair."),
    ServiceItem(id="electrical", icon="zap",
                title_ar="كهرباء السيارات", title_en="Auto Electrical",
                desc_ar="إصلاح الأعطال الكهربائية والبطاريات.",
                desc_en="Electrical faults and battery service."),
]


def list_services(lang: str) -> List[dict]:
    return [s.localized(lang) for s in SERVICES]
