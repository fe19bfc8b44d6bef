"""
WTForms Form Classes for the PetClinic Application

This module defines the forms used by the owner, pet and visit screens
for user input validation and CSRF protection.
"""

from datetime import date

from flask_wtf import FlaskForm
from wtforms import DateField, HiddenField, StringField, SubmitField
from wtforms.validators import DataRequired, Length, Optional, Regexp


class FindOwnersForm(FlaskForm):
    """Last-name search; an empty value lists every owner."""

    class Meta:
        csrf = False

    last_name = StringField('Last name', validators=[
        Optional(),
        Length(max=30, message='Must be 30 characters or less'),
    ])
    submit = SubmitField('Find Owner')


class OwnerForm(FlaskForm):
    """Owner creation and update form"""

    id = HiddenField()
    first_name = StringField('First Name', validators=[
        DataRequired(message='First name is required'),
        Length(max=30, message='Must be 30 characters or less'),
    ])
    last_name = StringField('Last Name', validators=[
        DataRequired(message='Last name is required'),
        Length(max=30, message='Must be 30 characters or less'),
    ])
    address = StringField('Address', validators=[
        DataRequired(message='Address is required'),
        Length(max=255, message='Must be 255 characters or less'),
    ])
    city = StringField('City', validators=[
        DataRequired(message='City is required'),
        Length(max=80, message='Must be 80 characters or less'),
    ])
    telephone = StringField('Telephone', validators=[
        DataRequired(message='Telephone is required'),
        Regexp(r'^\d{10}$', message='Telephone must be a 10-digit number'),
    ])
    submit = SubmitField('Save Owner')

    def populate_owner(self, owner):
        owner.first_name = self.first_name.data.strip()
        owner.last_name = self.last_name.data.strip()
        owner.address = self.address.data.strip()
        owner.city = self.city.data.strip()
        owner.telephone = self.telephone.data.strip()
        return owner


class PetForm(FlaskForm):
    """Pet creation and update form.

    Fields stay raw text: conversion and the pet rules run in the domain
    layer so every problem is reported with its error code.
    """

    id = HiddenField()
    name = StringField('Name')
    birth_date = StringField('Birth Date')
    type = StringField('Type')
    submit = SubmitField('Save Pet')


class VisitForm(FlaskForm):
    """Visit booking form"""

    # Left empty, the visit is booked for today.
    visit_date = DateField('Date', default=date.today, validators=[Optional()])
    description = StringField('Description', validators=[
        DataRequired(message='Description is required'),
        Length(max=255, message='Must be 255 characters or less'),
    ])
    submit = SubmitField('Add Visit')
