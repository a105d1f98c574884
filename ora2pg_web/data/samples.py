"""
Seed content shown in the source panel of every new session.
"""

DEFAULT_ORACLE_CODE = """CREATE TABLE employees (
    employee_id NUMBER(6),
    first_name VARCHAR2(20),
    last_name VARCHAR2(25) CONSTRAINT emp_last_name_nn NOT NULL,
    email VARCHAR2(25) CONSTRAINT emp_email_nn NOT NULL,
    phone_number VARCHAR2(20),
    hire_date DATE DEFAULT SYSDATE,
    job_id VARCHAR2(10) CONSTRAINT emp_job_nn NOT NULL,
    salary NUMBER(8,2),
    commission_pct NUMBER(2,2),
    manager_id NUMBER(6),
    department_id NUMBER(4),
    CONSTRAINT emp_salary_min CHECK (salary > 0), 
    CONSTRAINT emp_email_uk UNIQUE (email)
);

CREATE SEQUENCE emp_seq START WITH 1 INCREMENT BY 1;

CREATE OR REPLACE TRIGGER emp_insert_trg
BEFORE INSERT ON employees
FOR EACH ROW
BEGIN
  SELECT emp_seq.NEXTVAL INTO :new.employee_id FROM dual;
END;
/"""
