"""
Models Package

Exports all models for easy importing.
"""

from diabetes_api.models.admin import Admin
from diabetes_api.models.user import User
from diabetes_api.models.symptom import Symptom, UserSymptom
from diabetes_api.models.recommendation import Recommendation
from diabetes_api.models.diagnosis import Diagnosis

__all__ = ['Admin', 'User', 'Symptom', 'UserSymptom', 'Recommendation', 'Diagnosis']
