# visadesk/engine/scheme_config.py
"""
Policy tables for every supported scheme.

Bracket tables, requirement sets, thresholds, document baselines and
processing times are config, not code. Money is in 만원.

Bracket tables are ((lower_bound, score), ...) in ascending lower-bound
order. Level maps are {level: score} in ascending score order.
Requirement sets map requirement key -> critical flag.
"""

EDUCATION_LABELS = {
    "doctorate": "박사",
    "masters": "석사",
    "bachelors": "학사",
    "associate": "전문학사",
    "highschool": "고졸",
    "below": "고졸 미만",
}

COMMON_REQUIREMENTS = {
    "no_criminal_record": "범죄경력 없음",
    "passport_validity": "여권 유효기간 {min_passport_months}개월 이상",
}

# score margin / checklist percentage bands used for recommendation text
EXPLAIN_BANDS = {
    "score_comfortable_margin": 10,
    "checklist_comfortable_score": 90,
    "max_tips_in_recommendation": 3,
}

# confidence signal -> interview likelihood
INTERVIEW_RULES = {
    "score_low_margin": 10,
    "checklist_low_score": 90,
}


SCHEME_CONFIG = {
    # ------------------------------------------------------------------
    # SCORE-BASED
    # ------------------------------------------------------------------
    "F-2-7": {
        "name": "점수제 거주 비자",
        "kind": "score",
        "passing_score": 80,
        "max_score": 120,
        "dimensions": {
            "age": {
                "category": "기본항목", "item": "나이", "max": 25,
                "brackets": ((18, 20), (26, 25), (31, 23), (36, 20), (41, 15),
                             (46, 10), (51, 5)),
                "improvable": False,
            },
            "education": {
                "category": "기본항목", "item": "학력", "max": 35,
                "levels": {"below": 10, "highschool": 15, "associate": 20,
                           "bachelors": 25, "masters": 30, "doctorate": 35},
                "labels": EDUCATION_LABELS,
                "tip": "최종학력 {target} 취득 시",
            },
            "korean_degree": {
                "category": "기본항목", "item": "한국 학위 가산", "max": 5,
                "bonus": 5,
                "tip": "국내 대학 학사 이상 학위 취득 시",
            },
            "topik": {
                "category": "기본항목", "item": "TOPIK", "max": 20,
                "levels": {0: 0, 1: 3, 2: 6, 3: 10, 4: 13, 5: 16, 6: 20},
                "tip": "TOPIK {target}급 취득 시",
            },
            "kiip": {
                "category": "가산항목", "item": "사회통합프로그램", "max": 5,
                "levels": {0: 0, 1: 1, 2: 2, 3: 3, 4: 4, 5: 5},
                "tip": "사회통합프로그램 {target}단계 이수 시",
            },
            "income": {
                "category": "기본항목", "item": "연간 소득", "max": 20,
                "brackets": ((0, 0), (0.8, 5), (1.0, 8), (1.2, 10), (1.5, 13),
                             (2.0, 15), (2.5, 17), (3.0, 20)),
                "scale": "gni",
                "tip": "연간 소득 {target:,}만원 이상 달성 시",
            },
            "work_experience": {
                "category": "가산항목", "item": "한국 근무경력", "max": 10,
                "brackets": ((0, 0), (1, 4), (3, 7), (5, 10)),
                "tip": "한국 근무경력 {target}년 이상 달성 시",
            },
            "volunteer": {
                "category": "가산항목", "item": "봉사활동", "max": 5,
                "brackets": ((0, 0), (20, 1), (50, 3), (100, 5)),
                "tip": "봉사활동 {target}시간 이상 달성 시",
            },
            "tax_payment": {
                "category": "가산항목", "item": "납세 실적", "max": 5,
                "brackets": ((0, 0), (1, 1), (3, 3), (5, 5)),
                "tip": "납세 실적 {target}년 이상 달성 시",
            },
            "special_merit": {
                "category": "가산항목", "item": "특별공로", "max": 5,
                "bonus": 5,
                "tip": "특별공로(정부표창 등) 인정 시",
            },
            "korean_spouse": {
                "category": "가산항목", "item": "한국인 배우자", "max": 3,
                "bonus": 3,
                "improvable": False,
            },
            "minor_child": {
                "category": "가산항목", "item": "한국 출생 미성년 자녀", "max": 2,
                "bonus": 2,
                "improvable": False,
            },
        },
        "thresholds": {
            "low_skill_statuses": ("E-9", "H-2", "E-8", "E-10"),
            "warn_min_stay_years": 1,
        },
        "documents": {
            "base": [
                "여권 사본",
                "외국인등록증",
                "표준규격사진 1매",
                "수수료 (13만원)",
                "소득금액증명원 또는 근로소득원천징수영수증",
                "학력 증빙서류 (졸업증명서 + 아포스티유/영사확인)",
            ],
            "conditional": {
                "topik": ["TOPIK {topik_level}급 성적표"],
                "kiip": ["사회통합프로그램 이수증"],
                "korean_spouse": ["혼인관계증명서"],
                "minor_child": ["자녀 기본증명서"],
                "volunteer": ["봉사활동 확인서"],
                "special_merit": ["정부표창 등 공적 입증서류"],
                "work_experience": ["경력증명서"],
            },
            "closing": ["납세증명서 (국세/지방세)", "체류지 입증서류"],
        },
        "forms": ["통합신청서 (별지 제34호서식)"],
        "processing": {"standard_days": 60, "fast_track_days": None},
        "pathway_targets": ["F-5"],
    },

    "E-7": {
        "name": "특정활동 비자",
        "kind": "score",
        "passing_score": 60,
        "max_score": 100,
        "sub_types": ["E-7-1", "E-7-2", "E-7-3", "E-7-4", "E-7-S"],
        "dimensions": {
            "education": {
                "category": "학력", "item": "최종학력", "max": 30,
                "levels": {"highschool": 10, "associate": 15, "bachelors": 20,
                           "masters": 25, "doctorate": 30},
                "labels": EDUCATION_LABELS,
                "tip": "최종학력 {target} 취득 시",
            },
            "field_match": {
                "category": "학력", "item": "전공-직종 일치", "max": 5,
                "bonus": 5,
                "improvable": False,
            },
            "career": {
                "category": "경력", "item": "관련 경력", "max": 25,
                "brackets": ((0, 0), (1, 5), (3, 10), (5, 15), (7, 20), (10, 25)),
                "tip": "관련 경력 {target}년 이상 달성 시",
            },
            "salary": {
                "category": "처우", "item": "연봉 수준", "max": 20,
                "brackets": ((0, 0), (0.8, 5), (1.0, 10), (1.5, 15), (2.0, 20)),
                "scale": "gni",
                "tip": "연봉 {target:,}만원 이상 달성 시",
            },
            "company_size": {
                "category": "기업", "item": "고용기업 규모", "max": 10,
                "levels": {"startup": 3, "small": 5, "medium": 7, "large": 10},
                "labels": {"large": "대기업", "medium": "중견기업",
                           "small": "중소기업", "startup": "스타트업"},
                "improvable": False,
            },
            "innopolis": {
                "category": "기업", "item": "이노폴리스 입주기업", "max": 3,
                "bonus": 3,
                "improvable": False,
            },
            "national_cert": {
                "category": "자격", "item": "국가기술자격증", "max": 5,
                "bonus": 5,
                "tip": "관련 국가기술자격증 취득 시",
            },
            "korean_language": {
                "category": "한국어", "item": "한국어 능력", "max": 5,
                "levels": {"none": 0, "topik2": 3, "kiip3+": 4, "topik3+": 5},
                "labels": {"topik3+": "TOPIK 3급 이상", "topik2": "TOPIK 2급",
                           "kiip3+": "사회통합 3단계+", "none": "없음"},
                "tip": "한국어 능력 {target} 달성 시",
            },
        },
        "thresholds": {
            "min_salary_gni_ratio": 0.8,
            "skilled_worker_min_years": 5,
        },
        "documents": {
            "base": [
                "사증발급인정신청서 (별지 제21호서식)",
                "여권 사본",
                "표준규격사진 1매",
                "고용계약서",
                "고용업체 사업자등록증 사본",
                "학력 증명서 (아포스티유/영사확인)",
                "경력 증명서",
            ],
            "sub_types": {
                "E-7-4": ["숙련기능인력 점수표 및 입증서류"],
            },
            "conditional": {
                "national_cert": ["국가기술자격증 사본"],
                "innopolis": ["이노폴리스 입주 확인서"],
                "korean_language": ["한국어 능력 입증서류 (TOPIK 성적표 또는 사회통합프로그램 이수증)"],
            },
            "closing": ["고용업체 납세증명서", "고용추천서 (해당 직종)"],
        },
        "forms": ["통합신청서 (별지 제34호서식)", "특정활동(E-7) 고용추천서"],
        "processing": {"standard_days": 30, "fast_track_days": 14},
        "pathway_targets": ["F-2-7", "F-5"],
    },

    # ------------------------------------------------------------------
    # CHECKLIST-BASED
    # ------------------------------------------------------------------
    "D-10": {
        "name": "구직 비자",
        "kind": "checklist",
        "sub_types": ["D-10-1", "D-10-2"],
        "requirements": {
            **COMMON_REQUIREMENTS,
            "education": "학력 요건 (국내 전문학사 이상 또는 해외 학사 이상)",
            "bachelor_or_above": "학사 이상 학위",
            "recent_graduate": "졸업 후 {max_years_since_graduation}년 이내",
            "degree_certificate": "학위증명서 제출",
            "overseas_university": "해외 대학 요건 (세계 500위 이내 또는 석사 이상)",
            "oasis_or_ip": "OASIS 이수 또는 지식재산권 보유",
            "funds": "체류비용 {min_bank_balance:,}만원 이상",
            "topik": "TOPIK {min_topik}급 이상",
            "activity_plan": "활동계획서 (구직/창업)",
        },
        "requirement_sets": {
            "D-10-1": {
                "education": True,
                "recent_graduate": True,
                "degree_certificate": True,
                "no_criminal_record": True,
                "passport_validity": True,
                "overseas_university": False,
                "funds": False,
                "topik": False,
                "activity_plan": False,
            },
            "D-10-2": {
                "bachelor_or_above": True,
                "oasis_or_ip": True,
                "degree_certificate": True,
                "no_criminal_record": True,
                "passport_validity": True,
                "funds": False,
                "topik": False,
                "activity_plan": False,
            },
        },
        "thresholds": {
            "max_years_since_graduation": 3,
            "min_passport_months": 6,
            "min_bank_balance": 800,
            "min_topik": 4,
            "warn_years_since_graduation": 2,
        },
        "documents": {
            "base": [
                "사증발급신청서 (별지 제17호서식)",
                "여권",
                "여권용 사진 1매",
                "졸업증명서 또는 학위증명서",
                "성적증명서",
                "체류비용 입증서류 (은행잔고증명 등)",
            ],
            "sub_types": {
                "D-10-1": ["구직활동계획서"],
                "D-10-2": ["창업활동계획서", "OASIS 이수증 또는 지식재산권 증빙"],
            },
            "conditional": {
                "topik": ["TOPIK {topik_level}급 성적표"],
            },
            "closing": ["범죄경력증명서 (본국 발급)"],
        },
        "forms": ["사증발급신청서 (별지 제17호서식)"],
        "processing": {"standard_days": 21, "fast_track_days": None},
        "pathway_targets": ["E-7", "D-8"],
    },

    "F-5": {
        "name": "영주 비자",
        "kind": "checklist",
        "sub_types": ["F-5-1", "F-5-2", "F-5-5", "F-5-16"],
        "requirements": {
            **COMMON_REQUIREMENTS,
            "stay_period": "국내 합법 체류 {min_stay_years}년 이상",
            "current_status": "현재 체류자격 F-2-7",
            "marriage_period": "혼인 {min_marriage_years}년 이상 및 국내 체류 {min_stay_years}년 이상",
            "income": "연간 소득 1인당 GNI 이상 ({income_floor:,}만원)",
            "basic_knowledge": "기본소양 (사회통합프로그램 5단계 이수 또는 영주용 종합평가 합격)",
            "no_tax_arrears": "세금 체납 없음",
            "assets": "자산 {min_assets:,}만원 이상",
            "health_insurance": "건강보험료 납부",
            "investment": "투자금 {min_investment:,}만원 이상",
            "korean_employment": "내국인 {min_korean_employees}명 이상 고용",
        },
        "requirement_sets": {
            "F-5-1": {
                "stay_period": True,
                "income": True,
                "basic_knowledge": True,
                "no_criminal_record": True,
                "no_tax_arrears": True,
                "assets": False,
                "health_insurance": False,
            },
            "F-5-2": {
                "marriage_period": True,
                "basic_knowledge": True,
                "no_criminal_record": True,
                "income": False,
                "no_tax_arrears": False,
                "health_insurance": False,
            },
            "F-5-16": {
                "current_status": True,
                "stay_period": True,
                "income": True,
                "basic_knowledge": True,
                "no_criminal_record": True,
                "no_tax_arrears": True,
                "health_insurance": False,
            },
            "F-5-5": {
                "investment": True,
                "korean_employment": True,
                "stay_period": True,
                "no_criminal_record": True,
                "no_tax_arrears": False,
                "health_insurance": False,
            },
        },
        "thresholds": {
            "min_stay_years": 5,
            "min_marriage_years": 2,
            "income_gni_ratio": 1.0,
            "warn_income_gni_ratio": 1.2,
            "required_kiip_level": 5,
            "min_assets": 6000,
            "min_investment": 50000,
            "min_korean_employees": 5,
        },
        "sub_type_thresholds": {
            "F-5-1": {"min_stay_years": 5},
            "F-5-2": {"min_stay_years": 2},
            "F-5-16": {"min_stay_years": 3},
            "F-5-5": {"min_stay_years": 3},
        },
        "documents": {
            "base": [
                "체류자격변경허가신청서",
                "여권 및 외국인등록증",
                "표준규격사진 1매",
                "수수료 (23만원)",
                "체류기간 충족 증빙",
            ],
            "sub_types": {
                "F-5-1": ["소득금액증명원"],
                "F-5-2": ["혼인관계증명서", "배우자 가족관계증명서", "소득금액증명원"],
                "F-5-16": ["소득금액증명원", "F-2-7 점수표 사본"],
                "F-5-5": ["외국인투자기업 등록증명서", "내국인 고용 입증서류 (4대보험 가입자 명부)"],
            },
            "conditional": {
                "kiip": ["사회통합프로그램 이수증"],
                "pr_test": ["영주용 종합평가 합격증"],
                "assets": ["재산 입증서류 (부동산 등기부등본, 예금잔고증명 등)"],
            },
            "closing": ["범죄경력증명서", "납세증명서 (국세/지방세)"],
        },
        "forms": ["통합신청서 (별지 제34호서식)", "영주(F-5) 체류자격 신청서"],
        "processing": {"standard_days": 120, "fast_track_days": None},
        "pathway_targets": [],
    },

    "F-6": {
        "name": "결혼이민 비자",
        "kind": "checklist",
        "sub_types": ["F-6-1", "F-6-2", "F-6-3"],
        "requirements": {
            **COMMON_REQUIREMENTS,
            "marriage_registered_korea": "한국 혼인신고 완료",
            "marriage_registered_home": "본국 혼인신고 완료",
            "sponsor_no_criminal_record": "초청인 범죄경력 없음 (가정폭력·성범죄 등)",
            "household_income": "가구 소득요건 ({household_size}인 가구 기준 {income_floor:,}만원 이상)",
            "no_recent_invitation": "초청인 5년 내 외국인 배우자 초청 이력 없음",
            "communication": "의사소통 가능 (TOPIK {min_topik}급 이상 또는 공통 언어)",
            "housing": "주거공간 확보",
            "korean_child": "한국 국적 자녀",
            "raising_child": "자녀 양육 중",
            "applicant_no_criminal_record": "신청인 범죄경력 없음",
            "marriage_history": "한국 혼인신고 이력",
            "dissolution_not_at_fault": "본인 귀책사유 없는 혼인 단절",
        },
        "requirement_sets": {
            "F-6-1": {
                "marriage_registered_korea": True,
                "marriage_registered_home": True,
                "sponsor_no_criminal_record": True,
                "household_income": True,
                "no_recent_invitation": True,
                "communication": False,
                "housing": False,
            },
            "F-6-2": {
                "korean_child": True,
                "raising_child": True,
                "applicant_no_criminal_record": True,
                "housing": False,
                "communication": False,
            },
            "F-6-3": {
                "marriage_history": True,
                "dissolution_not_at_fault": True,
                "applicant_no_criminal_record": True,
                "communication": False,
            },
        },
        "thresholds": {
            "income_median_ratio": 0.5,
            "asset_income_rate": 0.05,
            "min_topik": 1,
            "warn_age_gap": 15,
            "warn_prior_count": 2,
        },
        "documents": {
            "base": [
                "결혼이민(F-6) 사증발급인정신청서",
                "여권 사본",
                "표준규격사진 1매",
            ],
            "sub_types": {
                "F-6-1": [
                    "혼인관계증명서 (한국)",
                    "본국 혼인증명서",
                    "초청장",
                    "신원보증서",
                    "초청인 소득금액증명원",
                    "초청인 범죄경력증명서",
                    "외국인 배우자 초청 이력 확인서",
                ],
                "F-6-2": ["자녀 기본증명서", "자녀 양육 입증서류"],
                "F-6-3": ["혼인단절 사유 입증서류 (사망·실종·이혼 판결문 등)"],
            },
            "conditional": {
                "children": ["자녀 가족관계증명서"],
                "household_assets": ["재산 입증서류 (예금잔고증명 등)"],
                "housing": ["주거공간 입증서류 (등기부등본 또는 임대차계약서)"],
                "topik": ["TOPIK {topik_level}급 성적표"],
            },
            "closing": ["건강진단서"],
        },
        "forms": ["통합신청서 (별지 제34호서식)", "결혼이민(F-6) 체류자격 신청서"],
        "processing": {"standard_days": 60, "fast_track_days": None},
        "pathway_targets": ["F-5"],
    },

    "D-2": {
        "name": "유학 비자",
        "kind": "checklist",
        "sub_types": ["D-2-1", "D-2-2", "D-2-3", "D-2-4", "D-2-5", "D-2-6"],
        "requirements": {
            **COMMON_REQUIREMENTS,
            "admission_letter": "표준입학허가서",
            "education_certificate": "최종학력 증명서",
            "financial_capacity": "재정능력 ({required_funds:,}만원 이상 잔고)",
            "language": "어학 요건 (TOPIK {min_topik}급 이상 또는 영어 능력)",
            "institution_accreditation": "교육기관 인증 (비자발급 제한 대학 아님)",
        },
        "requirement_sets": {
            **{
                sub: {
                    "admission_letter": True,
                    "education_certificate": True,
                    "no_criminal_record": True,
                    "financial_capacity": True,
                    "language": False,
                    "institution_accreditation": False,
                }
                for sub in ("D-2-1", "D-2-2", "D-2-3", "D-2-4")
            },
            **{
                sub: {
                    "admission_letter": True,
                    "education_certificate": True,
                    "no_criminal_record": True,
                    "financial_capacity": True,
                    "institution_accreditation": False,
                }
                for sub in ("D-2-5", "D-2-6")
            },
        },
        "thresholds": {
            "living_expenses": 1200,
            "min_topik": 3,
            "warn_funds_margin": 0.1,
        },
        "sub_type_thresholds": {
            "D-2-3": {"min_topik": 4},
            "D-2-4": {"min_topik": 4},
        },
        "documents": {
            "base": [
                "사증발급신청서 (별지 제17호서식)",
                "여권",
                "여권용 사진 1매",
                "표준입학허가서",
                "최종학력 증명서 (아포스티유/영사확인)",
                "재정능력 입증서류 (은행잔고증명)",
            ],
            "sub_types": {
                "D-2-5": ["연구계획서"],
                "D-2-6": ["교환학생 협정서 사본"],
            },
            "conditional": {
                "scholarship": ["장학금 지급 증명서"],
                "topik": ["TOPIK {topik_level}급 성적표"],
                "english": ["영어 능력 증빙 (TOEFL/IELTS 등)"],
            },
            "closing": ["결핵진단서 (해당 국가)"],
        },
        "forms": ["통합신청서 (별지 제34호서식)", "체류자격외 활동허가 신청서"],
        "processing": {"standard_days": 21, "fast_track_days": 10},
        "pathway_targets": ["D-10", "E-7"],
    },

    "E-9": {
        "name": "비전문취업 비자",
        "kind": "checklist",
        "sub_types": ["manufacturing", "construction", "agriculture", "fishery", "service"],
        "requirements": {
            **COMMON_REQUIREMENTS,
            "age_range": "연령 {min_age}~{max_age}세",
            "eps_topik": "EPS-TOPIK {min_eps_topik}점 이상 (200점 만점)",
            "skills_test": "기능시험 합격",
            "no_deportation": "강제퇴거·출국명령 이력 없음",
            "no_illegal_stay": "불법체류 이력 없음",
            "health_check": "건강검진 통과",
            "mou_country": "고용허가제 MOU 체결국 국적",
            "employment_contract": "표준근로계약 체결",
            "safety_training": "건설업 기초안전보건교육 이수",
        },
        "requirement_sets": {
            **{
                sector: {
                    "age_range": True,
                    "eps_topik": True,
                    "skills_test": False,
                    "no_criminal_record": True,
                    "no_deportation": True,
                    "no_illegal_stay": True,
                    "health_check": True,
                    "mou_country": True,
                    "employment_contract": True,
                    "passport_validity": True,
                }
                for sector in ("manufacturing", "agriculture", "fishery", "service")
            },
            "construction": {
                "age_range": True,
                "eps_topik": True,
                "skills_test": False,
                "no_criminal_record": True,
                "no_deportation": True,
                "no_illegal_stay": True,
                "health_check": True,
                "mou_country": True,
                "employment_contract": True,
                "passport_validity": True,
                "safety_training": True,
            },
        },
        "thresholds": {
            "min_age": 18,
            "max_age": 39,
            "min_eps_topik": 80,
            "min_passport_months": 6,
            "warn_foreign_worker_ratio": 0.3,
            "warn_eps_margin": 20,
            "warn_age": 37,
        },
        "documents": {
            "base": [
                "사증발급인정서 (고용주 신청)",
                "여권 사본",
                "표준근로계약서",
                "EPS-TOPIK 성적표",
                "건강검진 결과서",
            ],
            "sub_types": {
                "construction": ["건설업 기초안전보건교육 이수증"],
            },
            "conditional": {
                "skills_test": ["기능시험 합격 확인서"],
            },
            "closing": ["범죄경력증명서 (본국 발급)"],
        },
        "forms": ["통합신청서 (별지 제34호서식)", "근무처 변경·추가 신고서"],
        "processing": {"standard_days": 45, "fast_track_days": None},
        "pathway_targets": ["E-7", "F-2-7"],
    },

    "D-8": {
        "name": "기업투자 비자",
        "kind": "checklist",
        "sub_types": ["D-8-1", "D-8-4"],
        "requirements": {
            **COMMON_REQUIREMENTS,
            "investment": "투자금 {min_investment:,}만원 이상",
            "fdi_registration": "외국인투자기업 등록",
            "business_registration": "사업자등록",
            "funds_source": "투자자금 출처 입증",
            "office_lease": "사무실 임대차계약",
            "korean_employment": "내국인 {min_korean_employees}명 이상 고용",
            "bachelor_or_above": "학사 이상 학위",
            "oasis_points": "OASIS {min_oasis_points}점 이상",
            "ip": "지식재산권(특허 등) 보유",
        },
        "requirement_sets": {
            "D-8-1": {
                "investment": True,
                "fdi_registration": True,
                "business_registration": True,
                "funds_source": True,
                "no_criminal_record": True,
                "office_lease": False,
                "korean_employment": False,
            },
            "D-8-4": {
                "bachelor_or_above": True,
                "oasis_points": True,
                "business_registration": True,
                "no_criminal_record": True,
                "ip": False,
                "office_lease": False,
            },
        },
        "thresholds": {
            "min_investment": 10000,
            "min_korean_employees": 1,
            "min_oasis_points": 80,
            "warn_investment_margin": 0.2,
        },
        "documents": {
            "base": [
                "사증발급인정신청서 (별지 제21호서식)",
                "여권 사본",
                "표준규격사진 1매",
                "사업자등록증 사본",
            ],
            "sub_types": {
                "D-8-1": [
                    "외국인투자기업 등록증명서",
                    "투자자금 도입 입증서류 (외국환매입증명서)",
                    "법인등기사항전부증명서",
                ],
                "D-8-4": ["학위증", "OASIS 점수 입증서류", "법인등기사항전부증명서"],
            },
            "conditional": {
                "ip": ["지식재산권 등록증 (특허증 등)"],
                "office_lease": ["사무실 임대차계약서"],
                "korean_employees": ["내국인 고용 입증서류 (4대보험 가입자 명부)"],
            },
            "closing": ["범죄경력증명서"],
        },
        "forms": ["사증발급인정신청서 (별지 제21호서식)"],
        "processing": {"standard_days": 30, "fast_track_days": 14},
        "pathway_targets": ["F-5"],
    },
}


def get_scheme_config(code: str):
    return SCHEME_CONFIG.get(code)


def thresholds_for(code: str, sub_type: str | None = None) -> dict:
    """Scheme thresholds with any sub-type overrides applied."""
    cfg = SCHEME_CONFIG[code]
    merged = dict(cfg.get("thresholds", {}))
    if sub_type:
        merged.update(cfg.get("sub_type_thresholds", {}).get(sub_type, {}))
    return merged
